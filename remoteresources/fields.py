# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

Fields are class attributes for resource classes that provide data coding
functionality for your properties.

A field reads its value out of the resource's tracked `attributes` mapping
and writes encoded values back into it, so setting a field's attribute is a
change that the next save of the resource will send.

The `remoteresources.fields` module also provides the `Property` base class
for other declarative attributes, such as the association descriptors in
`remoteresources.associations`.

"""

from datetime import datetime, timedelta, tzinfo
import time

import remoteresources.dataobject


class Property(object):

    """An attribute that can be installed declaratively on a `DataObject` to
    provide data encoding or loading behavior.

    The primary kinds of `Property` objects are `Field` (and its subclasses)
    and the `HasOne` and `HasMany` associations.

    """

    def install(self, attrname, cls):
        """Signals to the `Property` that it has been installed on the given
        class as an attribute with the given name.

        This implementation does nothing. Override this method to customize
        the behavior to install an attribute on DataObject classes where your
        field is declared.

        """
        pass


class Field(Property):

    """A property for encoding object attributes as attribute data values
    and decoding attribute data values into object attributes.

    Use a `Field` instance directly for simple attributes that can be the
    same type as their data values, that is, for strings, numbers, and
    boolean values. If your attribute data does need converted, use one of
    the `Field` subclasses or override the `decode()` and `encode()` methods
    in a new subclass of `Field`.

    """

    def __init__(self, api_name=None, default=None):
        """Sets the field's matching data key and default value.

        Optional parameter `api_name` is the key of this field's value in the
        resource's attribute data. If not given, the attribute name of the
        field when its class was defined is used.

        Optional parameter `default` is the value of the attribute when the
        data contains no value for it. If `default` is callable, it is called
        with the object and its result is used instead.

        """
        self.api_name = api_name
        self.default = default

    def install(self, attrname, cls):
        self.attrname = attrname
        if self.api_name is None:
            self.api_name = attrname
        self.of_cls = cls

    def __get__(self, obj, cls):
        """Returns the field's value on the given object instance, or the
        field's default value if no value for the field is available."""
        if obj is None:
            # Yield the real field instance when gotten through the class.
            return self

        try:
            value = obj.attributes[self.api_name]
        except KeyError:
            if callable(self.default):
                return self.default(obj)
            return self.default
        return self.decode(value)

    def __set__(self, obj, value):
        if value is not None:
            value = self.encode(value)
        obj.attributes[self.api_name] = value

    def __delete__(self, obj):
        try:
            del obj.attributes[self.api_name]
        except KeyError:
            pass

    def decode(self, value):
        """Decodes an attribute data value into an object attribute value.

        This implementation returns the `value` parameter unchanged.

        """
        return value

    def encode(self, value):
        """Encodes an object attribute value into an attribute data value.

        This implementation returns the `value` parameter unchanged.

        """
        return value


class List(Field):

    """A field representing a homogeneous list of data.

    The elements of the list are decoded through another field specified when
    the `List` is declared.

    """

    def __init__(self, fld, **kwargs):
        super(List, self).__init__(**kwargs)
        self.fld = fld

    def install(self, attrname, cls):
        super(List, self).install(attrname, cls)
        self.fld.install(attrname, cls)

    def decode(self, value):
        if value is None:
            return None
        return [self.fld.decode(v) for v in value]

    def encode(self, value):
        return [self.fld.encode(v) for v in value]


class Dict(List):

    """A field representing a homogeneous mapping of data.

    The values of the mapping are decoded through another field specified
    when the `Dict` is declared.

    """

    def decode(self, value):
        if value is None:
            return None
        return dict((k, self.fld.decode(v)) for k, v in value.items())

    def encode(self, value):
        return dict((k, self.fld.encode(v)) for k, v in value.items())


class AcceptsStringCls(object):
    """Mixin for properties with a ``cls`` attribute that can either be a
    ``DataObject`` subclass or a string name of a ``DataObject`` subclass (to
    allow forward references)."""

    def get_cls(self):
        cls = self.__dict__['cls']
        if not callable(cls):
            cls = remoteresources.dataobject.find_by_name(cls)
        return cls

    def set_cls(self, cls):
        self.__dict__['cls'] = cls

    cls = property(get_cls, set_cls)


class UTC(tzinfo):
    """UTC"""
    ZERO = timedelta(0)

    def utcoffset(self, dt):
        return UTC.ZERO

    def tzname(self, dt):
        return "UTC"

    def dst(self, dt):
        return UTC.ZERO


class Datetime(Field):

    """A field representing a timestamp."""

    dateformat = "%Y-%m-%dT%H:%M:%SZ"
    utc = UTC()

    def __init__(self, dateformat=None, **kwargs):
        super(Datetime, self).__init__(**kwargs)
        if dateformat is not None:
            self.dateformat = dateformat

    def decode(self, value):
        """Decodes a timestamp string into a Python `datetime` instance.

        Timestamp strings should be of the format ``YYYY-MM-DDTHH:MM:SSZ``.
        The resulting `datetime` will have UTC tzinfo.

        """
        if value is None:
            return None
        try:
            return datetime(*(time.strptime(value, self.dateformat))[0:6],
                    tzinfo=Datetime.utc)
        except (TypeError, ValueError):
            raise TypeError('Value to decode %r is not a valid date time stamp' % (value,))

    def encode(self, value):
        """Encodes a Python `datetime` instance into a timestamp string."""
        if not isinstance(value, datetime):
            raise TypeError('Value to encode %r is not a datetime' % (value,))
        if value.tzinfo is not None:
            value = value.astimezone(Datetime.utc)
        return value.replace(microsecond=0).strftime(self.dateformat)
