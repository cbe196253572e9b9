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

`DataObject` is the class of object that holds a resource's attribute data
and gives it shape through declared fields and associations.

The data itself lives in a `TrackedDict` (the object's `attributes`), which
remembers what was changed since the data was last saved. `Field` instances
declared on `DataObject` subclasses provide coding between that data and
object attributes; `HasOne` and `HasMany` associations provide access to
related resources.

"""

import re

from remoteresources.trackeddict import TrackedDict
import remoteresources.fields


classes_by_name = {}


def find_by_name(name):
    """Finds and returns the DataObject subclass with the given name.

    Parameter `name` should be a bare class name with no module. If there is
    no class by that name, raises `KeyError`.

    """
    return classes_by_name[name]


def underscore(name):
    """Converts a CamelCase class name into a snake_case name."""
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', name)
    return name.lower()


def pluralize(name):
    if re.search(r'[^aeiou]y$', name):
        return name[:-1] + 'ies'
    if re.search(r'(s|x|z|ch|sh)$', name):
        return name + 'es'
    return name + 's'


class DataObjectMetaclass(type):
    """Metaclass for `DataObject` classes.

    This metaclass installs all `remoteresources.fields.Property` instances
    declared as attributes of the new class, collecting `Field` instances in
    the class's `fields` mapping and associations, in declaration order, in
    its `associations` list.

    It also names the resource the class represents, if the class does not
    name it itself, and makes the new class findable through the
    `dataobject.find_by_name()` function.

    """

    def __new__(cls, name, bases, attrs):
        fields = {}
        associations = []
        new_fields = {}
        new_properties = {}

        # Inherit all the parent DataObject classes' fields and associations.
        for base in bases:
            if isinstance(base, DataObjectMetaclass):
                fields.update(base.fields)
                for association in base.associations:
                    if association not in associations:
                        associations.append(association)

        for attrname, field in attrs.items():
            if isinstance(field, remoteresources.fields.Property):
                new_properties[attrname] = field
                if isinstance(field, remoteresources.fields.Field):
                    new_fields[attrname] = field
            elif attrname in fields:
                # Throw out any parent fields that the subclass defined as
                # something other than a Field.
                del fields[attrname]

        fields.update(new_fields)
        attrs['fields'] = fields
        attrs['associations'] = associations
        obj_cls = super(DataObjectMetaclass, cls).__new__(cls, name, bases, attrs)

        for attrname, value in new_properties.items():
            obj_cls.add_to_class(attrname, value)

        if 'singular_resource_name' not in attrs:
            obj_cls.singular_resource_name = underscore(name)
        if 'resource_name' not in attrs:
            obj_cls.resource_name = pluralize(obj_cls.singular_resource_name)

        # Register the new class so associations can forward-reference it.
        classes_by_name[name] = obj_cls

        return obj_cls

    def add_to_class(cls, name, value):
        try:
            value.install(name, cls)
        except (NotImplementedError, AttributeError):
            setattr(cls, name, value)


class DataObject(object, metaclass=DataObjectMetaclass):

    """An object holding attribute data that can be decoded from or encoded
    as a dictionary.

    DataObject subclasses should be declared with their data attributes
    defined as instances of fields from the `remoteresources.fields` module.
    For example:

    >>> from remoteresources import dataobject, fields
    >>> class Ticket(dataobject.DataObject):
    ...     subject = fields.Field()
    ...     updated = fields.Datetime(api_name='updated_at')
    ...

    Resource classes (see `remoteresources.resource`) can also declare
    associations from the `remoteresources.associations` module.

    Data that has no declared field is still kept, and is available by item
    access on the object (``ticket['priority']``).

    """

    client = None

    def __init__(self, attributes=None, **kwargs):
        """Initializes a new `DataObject` with the given attribute data.

        Values given for associations that are resources (or lists of
        resources) rather than data are assigned through the association, as
        if set as attributes after construction.

        """
        self.attributes = TrackedDict()
        self._associations = {}

        data = dict(attributes or {})
        data.update(kwargs)
        for key, value in data.items():
            association = self.association_named(key)
            if association is not None and association.assigns(value):
                association.__set__(self, value)
            else:
                self.attributes[key] = value

    @classmethod
    def association_named(cls, name):
        """Returns the association of this class with the given attribute or
        data name, or `None` if there is no such association."""
        for association in cls.associations:
            if name in (association.attrname, association.api_name):
                return association
        return None

    def __eq__(self, other):
        """Returns whether two `DataObject` instances are equivalent.

        If the `DataObject` instances are of the same type and contain the
        same attribute data, the objects are equivalent.

        """
        if type(self) != type(other):
            return False
        return self.attributes == other.attributes

    def __ne__(self, other):
        return not self == other

    __hash__ = object.__hash__

    def __getitem__(self, key):
        return self.attributes[key]

    def __setitem__(self, key, value):
        self.attributes[key] = value

    def __contains__(self, key):
        return key in self.attributes

    def get(self, key, default=None):
        return self.attributes.get(key, default)

    @property
    def changes(self):
        """The attribute data changed since the object was last saved."""
        return self.attributes.changes

    @property
    def changed(self):
        """Whether any attribute data changed since the object was last
        saved."""
        return self.attributes.changed()

    def to_dict(self):
        """Encodes the DataObject to a dictionary of all its attribute
        data."""
        return self.attributes.to_dict()

    # The representation used when embedding the object in another
    # resource's request body.
    to_param = to_dict

    @classmethod
    def from_dict(cls, data):
        """Decodes a dictionary into a new `DataObject` instance with no
        pending changes."""
        self = cls(data)
        self.attributes.clear_changes()
        return self

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.attributes.to_dict())
