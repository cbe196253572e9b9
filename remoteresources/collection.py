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

from collections.abc import Mapping

from remoteresources.actions import Destroy, Persistable, normalize_includes
from remoteresources.dataobject import DataObject
from remoteresources.rescue import rescue_client_error
from remoteresources.sideloading import set_includes
import remoteresources.associations


class SequenceProxy(object):

    """An abstract class implementing the sequence protocol by proxying it to
    an instance attribute.

    `SequenceProxy` instances act like sequences by forwarding all sequence
    method calls to their `entries` attributes. The `entries` attribute should
    be a list or some other that implements the sequence protocol.

    """

    def make_sequence_method(methodname):
        """Makes a new function that proxies calls to `methodname` to the
        `entries` attribute of the instance on which the function is called as
        an instance method."""
        def seqmethod(self, *args, **kwargs):
            # Proxy these methods to self.entries.
            return getattr(self.entries, methodname)(*args, **kwargs)
        seqmethod.__name__ = methodname
        return seqmethod

    __len__      = make_sequence_method('__len__')
    __getitem__  = make_sequence_method('__getitem__')
    __setitem__  = make_sequence_method('__setitem__')
    __delitem__  = make_sequence_method('__delitem__')
    __iter__     = make_sequence_method('__iter__')
    __reversed__ = make_sequence_method('__reversed__')
    __contains__ = make_sequence_method('__contains__')


class Collection(SequenceProxy, Persistable):

    """A set of resources of one class, as found at a collection path of the
    remote API.

    A `Collection` is delivered lazily: unless it was made with its
    `resources` already in hand, its contents are requested from the API only
    when they are first used as a sequence. Until then the collection can be
    filtered by parameters that are passed on to the API, including through
    slice notation:

    >>> tickets = client.collection(Ticket)
    >>> recent = tickets.filter(sort_by='created_at')[0:25]

    Saving a collection saves each of its changed members.

    """

    def __init__(self, client, resource_class, association=None,
                 resources=None, options=None):
        self.client = client
        self.resource_class = resource_class
        if association is None:
            association = remoteresources.associations.Association(resource_class)
        self.association = association
        self.options = dict(options or {})
        self.resources = resources

    @property
    def entries(self):
        if self.resources is None:
            if self.deliver() is None:
                self.resources = []
        return self.resources

    @rescue_client_error(None)
    def deliver(self):
        """Requests the members of the collection from the API, replacing any
        members already delivered, and returns them."""
        options = dict(self.options)
        includes = normalize_includes(options)
        path = self.association.generate_path(options=options, with_id=False)

        response = self.client.connection.request('GET', path, params=options)
        body = response.body or {}

        self.resources = [self.wrap(data, clean=True)
            for data in body.get(self.resource_class.resource_name) or ()]
        set_includes(self.resources, includes, body)
        return self.resources

    def wrap(self, value, clean=False):
        if not isinstance(value, Mapping):
            if self.association.parent is not None and isinstance(value, DataObject):
                value.association = self.association
            return value
        resource = self.resource_class(self.client, value,
            association=self.association)
        if clean:
            resource.attributes.clear_changes()
        return resource

    def filter(self, **kwargs):
        """Returns a new undelivered `Collection` equivalent to this one but
        further filtered by the given keyword parameters, which are sent to
        the API as query parameters."""
        options = dict(self.options)
        options.update(kwargs)
        return type(self)(self.client, self.resource_class,
            association=self.association, options=options)

    def __getitem__(self, key):
        """Translates slice notation on a `Collection` instance into ``limit``
        and ``offset`` filter parameters."""
        if isinstance(key, slice):
            args = dict()
            if key.start is not None:
                args['offset'] = key.start
                if key.stop is not None:
                    args['limit'] = key.stop - key.start
            elif key.stop is not None:
                args['limit'] = key.stop
            return self.filter(**args)

        return self.entries[key]

    def append(self, item):
        """Adds a resource, or a new resource made of the given data, to the
        collection."""
        self.entries.append(self.wrap(item))

    def create(self, attributes=None, **kwargs):
        """Creates a new resource in the collection.

        Returns the saved resource, or `None` if it could not be saved.

        """
        data = dict(attributes or {})
        data.update(kwargs)
        resource = self.wrap(data)
        if not resource.save():
            return None
        if self.resources is not None:
            self.resources.append(resource)
        return resource

    def save(self):
        """Saves every changed member of the collection that can be saved.

        Returns whether all those saves succeeded. A collection that was
        never delivered has nothing to save.

        """
        if self.resources is None:
            return True
        result = True
        for resource in self.resources:
            if not isinstance(resource, Persistable):
                continue
            if isinstance(resource, Destroy) and resource.destroyed:
                continue
            if not resource.changed:
                continue
            if not resource.save():
                result = False
        return result

    @property
    def changed(self):
        """Whether any delivered member of the collection has changes."""
        return any(r.changed for r in self.resources or ())

    @property
    def ids(self):
        return [r.get('id') for r in self.entries]

    def to_param(self):
        return [r.to_param() for r in self.resources or ()]

    def __repr__(self):
        if self.resources is None:
            return '<Collection of %s (undelivered) %s>' % (
                self.resource_class.__name__, self.association.generate_path(
                    options=dict(self.options), with_id=False))
        return '<Collection of %s %r>' % (self.resource_class.__name__,
            self.resources)
