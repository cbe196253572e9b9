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

Associations are declarative properties for resource classes that relate a
resource to other resources, either to one (`HasOne`) or to a collection of
them (`HasMany`).

An association is materialized lazily: the related resource or collection is
built the first time the association attribute is read, and is cached on the
owning resource until that resource is next saved. Only associations that were
materialized this way are considered when the owner is saved; see
`save_associations()`.

This module also provides `Association`, which works out the URL paths of
resources, nested below a parent resource or not.

"""

from collections.abc import Mapping
import logging

from remoteresources.collection import Collection
from remoteresources.errors import ClientError
from remoteresources.fields import AcceptsStringCls, Property
import remoteresources.actions
import remoteresources.dataobject


log = logging.getLogger('remoteresources.associations')


class Association(object):

    """The relation through which a resource is reached, used to generate
    the resource's path.

    Parameter `cls` is the resource class. Optional parameter `parent` is the
    resource under which the path is nested, as in
    ``tickets/7/comments/12``. Optional parameter `path` replaces the
    resource class's `resource_name` as the last path segment before the id.

    """

    def __init__(self, cls, parent=None, path=None):
        self.cls = cls
        self.parent = parent
        self.path = path

    def generate_path(self, instance=None, options=None, with_id=True,
                      with_parent=True):
        """Returns the path of a resource, or of its collection.

        The resource's id is taken from the ``id`` member of the dictionary
        `options`, if any, or else from the resource `instance`. The ``id``
        member is removed from `options`, so the remaining members can be
        used as query parameters. No id is included if `with_id` is false or
        the resource class is a singular resource.

        The path is nested below the parent's own path if the association has
        a saved parent and `with_parent` is true.

        """
        parts = []
        parent = self.parent
        if with_parent and parent is not None and not parent.new_record:
            parts.append(parent.path())
        parts.append(self.path or self.cls.resource_name)

        resource_id = None
        if options is not None:
            resource_id = options.pop('id', None)
        if resource_id is None and instance is not None:
            resource_id = instance.id
        if with_id and resource_id is not None and not self.cls.is_singular:
            parts.append(str(resource_id))

        return '/'.join(str(part).strip('/') for part in parts)

    def __repr__(self):
        return '<Association %s parent=%r path=%r>' % (self.cls.__name__,
            self.parent, self.path)


class AssociationDescriptor(AcceptsStringCls, Property):

    """A property relating instances of the class on which it is declared
    to resources of another class.

    Use the `HasOne` and `HasMany` subclasses to declare associations.

    """

    collection = False

    def __init__(self, cls, api_name=None, inline=False, nested=None,
                 path=None, id_key=None):
        """Sets the resource class of the association and how it is saved.

        Parameter `cls` is the related resource class, or the name of it.

        Optional parameter `api_name` is the key under which data for the
        association is found in (and inlined into) the owner's attributes. If
        not given, the attribute name of the association is used.

        Optional parameter `inline` says whether the association's data is
        sent inside the owner's own request body: never (``False``), always
        when it has changed (``True``), or only when the owner is being
        created (``'create'``), in which case the related resource is not
        saved on its own either.

        Optional parameter `nested` says whether related resources live
        under the owner's path. Optional parameters `path` and `id_key`
        override the related resources' last path segment and the owner's
        attribute naming their ids.

        """
        if inline not in (False, True, 'create'):
            raise ValueError("inline must be False, True or 'create', not %r"
                % (inline,))
        self.cls = cls
        self.api_name = api_name
        self.inline = inline
        if nested is None:
            nested = self.collection
        self.nested = nested
        self.path = path
        self._id_key = id_key

    def install(self, attrname, cls):
        self.attrname = attrname
        if self.api_name is None:
            self.api_name = attrname
        self.of_cls = cls
        cls.associations[:] = [a for a in cls.associations
            if a.attrname != attrname]
        cls.associations.append(self)

    @property
    def id_key(self):
        """The owner's attribute holding the related resource id(s)."""
        if self._id_key is None:
            return self.default_id_key()
        return self._id_key

    def default_id_key(self):
        raise NotImplementedError

    def association_for(self, owner):
        parent = owner if self.nested else None
        return Association(self.cls, parent=parent, path=self.path)

    def wrap(self, owner, value, clean=False):
        """Returns `value` as an instance of the association's resource class.

        Mappings are made into new resources; those are left with no pending
        changes if `clean` is true, as for data received from the server.
        Resources of a nested association are moved below `owner`.

        """
        if not isinstance(value, Mapping):
            if self.nested and isinstance(value, remoteresources.dataobject.DataObject):
                value.association = self.association_for(owner)
            return value
        resource = self.cls(owner.client, value,
            association=self.association_for(owner))
        if clean:
            resource.attributes.clear_changes()
        return resource

    def used(self, owner):
        """Returns whether the association was materialized on `owner`."""
        return self.attrname in owner._associations

    def cached(self, owner):
        return owner._associations.get(self.attrname)

    def cache(self, owner, value):
        """Sets the materialized value of the association on `owner` without
        changing any of its attributes."""
        owner._associations[self.attrname] = value

    def load(self, owner, data):
        """Caches the association on `owner` as built from data received
        from the server."""
        raise NotImplementedError

    def assigns(self, value):
        """Returns whether `value` is something to assign to the association
        rather than data to keep in the owner's attributes."""
        raise NotImplementedError

    def __get__(self, owner, cls):
        if owner is None:
            # Yield the real association instance when gotten through the class.
            return self
        if not self.used(owner):
            self.cache(owner, self.materialize(owner))
        return self.cached(owner)

    def materialize(self, owner):
        raise NotImplementedError


class HasOne(AssociationDescriptor):

    """An association with a single other resource.

    The related resource is built from data embedded in the owner's
    attributes if there is any, or else fetched by the id in the owner's
    ``<name>_id`` attribute. Assigning a saved resource to the association
    sets that id attribute.

    """

    def default_id_key(self):
        return '%s_id' % self.attrname

    def assigns(self, value):
        return isinstance(value, remoteresources.dataobject.DataObject)

    def materialize(self, owner):
        data = owner.attributes.get(self.api_name)
        if isinstance(data, Mapping):
            return self.wrap(owner, data, clean=True)

        resource_id = owner.attributes.get(self.id_key)
        if resource_id is None:
            return None
        if not issubclass(self.cls, remoteresources.actions.Read):
            return None
        return self.cls.find(owner.client, id=resource_id,
            association=self.association_for(owner))

    def load(self, owner, data):
        self.cache(owner, self.wrap(owner, data, clean=True))

    def __set__(self, owner, value):
        if value is None:
            self.cache(owner, None)
            return
        if not isinstance(value, (Mapping, remoteresources.dataobject.DataObject)):
            raise TypeError('%s must be set to a %s, a mapping or None, not %r'
                % (self.attrname, self.cls.__name__, value))
        resource = self.wrap(owner, value)
        self.cache(owner, resource)
        resource_id = resource.get('id')
        if resource_id is not None:
            owner.attributes[self.id_key] = resource_id


class HasMany(AssociationDescriptor):

    """An association with a collection of other resources.

    The collection is built from a list of data embedded in the owner's
    attributes if there is one. Otherwise the collection of a saved owner is
    fetched from the path nested below the owner's own when first used.
    Assigning resources to the association sets the owner's
    ``<singular>_ids`` attribute to their ids.

    """

    collection = True

    def default_id_key(self):
        return '%s_ids' % self.cls.singular_resource_name

    def assigns(self, value):
        if isinstance(value, Collection):
            return True
        if isinstance(value, (list, tuple)):
            return any(isinstance(v, remoteresources.dataobject.DataObject)
                for v in value)
        return False

    def materialize(self, owner):
        association = self.association_for(owner)
        data = owner.attributes.get(self.api_name)
        if isinstance(data, list):
            resources = [self.wrap(owner, v, clean=True) for v in data]
            return Collection(owner.client, self.cls, association=association,
                resources=resources)
        if owner.new_record:
            return Collection(owner.client, self.cls, association=association,
                resources=[])
        return Collection(owner.client, self.cls, association=association)

    def load(self, owner, data):
        resources = [self.wrap(owner, v, clean=True) for v in data]
        self.cache(owner, Collection(owner.client, self.cls,
            association=self.association_for(owner), resources=resources))

    def __set__(self, owner, value):
        if isinstance(value, Collection):
            collection = value
        else:
            collection = Collection(owner.client, self.cls,
                association=self.association_for(owner),
                resources=[self.wrap(owner, v) for v in value or ()])
        self.cache(owner, collection)

        if collection.resources is None:
            return
        ids = [r.get('id') for r in collection.resources
            if r.get('id') is not None]
        if ids:
            owner.attributes[self.id_key] = ids


def save_associations(resource):
    """Saves the materialized associations of `resource` ahead of its own
    save.

    Associations are handled in the order they were declared. An association
    that has changed is saved on its own, unless it is to be inlined into the
    creation of `resource`; a successful save writes the association's id(s)
    back onto `resource`. Changed associations declared ``inline=True`` (or
    ``inline='create'`` while `resource` is new) are then embedded in the
    attributes of `resource` so they are sent with its own request.

    An association that fails to save is skipped.

    """
    for descriptor in type(resource).associations:
        if not descriptor.used(resource):
            continue
        association = descriptor.cached(resource)
        if association is None:
            continue

        inline_creation = descriptor.inline == 'create' and resource.new_record
        changed = isinstance(association, Collection) or association.changed

        if (isinstance(association, remoteresources.actions.Persistable)
                and changed and not inline_creation
                and _save_association(resource, descriptor, association)):
            # Set the id or ids attribute.
            descriptor.__set__(resource, association)

        if descriptor.inline is True or inline_creation:
            if association.changed:
                resource.attributes[descriptor.api_name] = association.to_param()


def _save_association(resource, descriptor, association):
    try:
        saved = association.save()
    except ClientError as exc:
        log.warning('Could not save %s of %r: %s', descriptor.attrname,
            resource, exc)
        return False
    if not saved:
        log.warning('Could not save %s of %r; saving without it',
            descriptor.attrname, resource)
    return saved


def clear_associations(resource):
    """Drops all the materialized associations of `resource`, so they are
    built afresh when next used."""
    resource._associations.clear()
