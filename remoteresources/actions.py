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

The lifecycle operations of resources, as mixin classes.

Each class here provides one capability (saving, reading, creating,
updating or destroying) for the resource classes that include it. The
resource classes in `remoteresources.resource` combine them; combine them
yourself for resources of an API that only supports some of the operations:

>>> class Activity(Read, DataResource):
...     pass

Operations that exchange requests with the API rescue the `ClientError`
exceptions of failed exchanges (see `remoteresources.rescue`) and report
failure as a false or `None` result. Their ``_or_raise`` variants raise an
`OperationFailed` exception for such a result instead.

"""

from remoteresources.errors import OperationFailed
from remoteresources.rescue import rescue_client_error
from remoteresources.sideloading import set_includes
import remoteresources.associations


def normalize_includes(options):
    """Returns the list of sideloads requested by the ``include`` member of
    the dictionary `options`, which is rewritten as the comma-separated
    string the API expects."""
    includes = options.get('include')
    if includes is None:
        return []
    if isinstance(includes, str):
        includes = includes.split(',')
    includes = [name.strip() for name in includes if name.strip()]
    if includes:
        options['include'] = ','.join(includes)
    else:
        del options['include']
    return includes


class Persistable(object):

    """The capability of being saved to the remote API."""

    def save(self):
        """Saves the object, returning whether it was saved."""
        raise NotImplementedError


class Save(Persistable):

    """Saving of resources: a ``POST`` request for a new resource or a
    ``PUT`` request for an existing one, sending only the changed attribute
    data.

    Set `unnested_params` on a resource class to send that data as the whole
    request body, rather than nested under the resource's singular name.

    """

    unnested_params = False

    @rescue_client_error(False)
    def save(self, path=None):
        """Creates or updates the resource through the API, unless it was
        destroyed.

        The resource's materialized associations are saved (or inlined) first.
        The request goes to the resource's collection path for a new resource
        and to its own URL or path otherwise; optional parameter `path`
        replaces either.

        On success the attribute data in the response is merged into the
        resource, its changes are cleared, its cached associations are
        dropped, and `True` is returned.

        """
        if isinstance(self, Destroy) and self.destroyed:
            return False

        if self.new_record:
            method = 'POST'
            req_path = self.path()
        else:
            method = 'PUT'
            req_path = self.url or self.path()

        if path is not None:
            req_path = path

        self.save_associations()

        response = self.client.connection.request(method, req_path,
            body=self.attributes_for_save())

        body = response.body
        if isinstance(body, dict):
            self.attributes.deep_update(body.get(self.singular_resource_name) or {})
        self.attributes.clear_changes()
        self.clear_associations()
        return True

    def save_or_raise(self, path=None):
        """Saves the resource as with `save()`, raising an `OperationFailed`
        exception if it could not be saved."""
        if not self.save(path=path):
            raise OperationFailed('Save failed %s %r'
                % (type(self).__name__, self.changes))
        return True

    def attributes_for_save(self):
        """Returns the request body for saving the resource."""
        if self.unnested_params:
            return self.attributes.changes
        return {self.singular_resource_name: self.attributes.changes}

    def save_associations(self):
        remoteresources.associations.save_associations(self)

    def clear_associations(self):
        """Drops all cached associations."""
        remoteresources.associations.clear_associations(self)


class Read(object):

    """Finding resources by id."""

    @classmethod
    def find_or_raise(cls, client, **options):
        """Fetches a resource through the given client.

        The keyword parameter `id` is required, unless the resource class is
        a singular resource. Optional keyword parameter `association` is the
        `Association` giving the resource's path, for resources nested below
        another resource. Optional keyword parameter `include` names the
        associations to sideload along with the resource. All other keyword
        parameters are sent as query parameters.

        Raises the `ClientError` of a failed request.

        """
        if options.get('id') is None and not cls.is_singular:
            raise ValueError('No id given to find %s' % cls.__name__)

        association = options.pop('association', None)
        if association is None:
            association = remoteresources.associations.Association(cls)
        includes = normalize_includes(options)
        path = association.generate_path(options=options)

        response = client.connection.request('GET', path, params=options)
        body = response.body or {}

        resource = cls(client, body.get(cls.singular_resource_name) or {},
            association=association)
        resource.attributes.clear_changes()
        set_includes(resource, includes, body)
        return resource

    @classmethod
    @rescue_client_error(None)
    def find(cls, client, **options):
        """Fetches a resource as with `find_or_raise()`, returning `None` if
        the request fails."""
        return cls.find_or_raise(client, **options)


class Create(Save):

    """Creating resources with a class method."""

    @classmethod
    @rescue_client_error(None)
    def create(cls, client, attributes=None, **kwargs):
        """Creates a new resource of the given attribute data.

        Returns the saved resource, or `None` if it could not be saved.

        """
        resource = cls(client, attributes, **kwargs)
        if not resource.save():
            return None
        return resource

    @classmethod
    def create_or_raise(cls, client, attributes=None, **kwargs):
        """Creates a new resource as with `create()`, raising an
        `OperationFailed` exception if it could not be saved."""
        resource = cls.create(client, attributes, **kwargs)
        if resource is None:
            data = dict(attributes or {})
            data.update(kwargs)
            raise OperationFailed('Create failed %s %r' % (cls.__name__, data))
        return resource


class Update(Save):

    """Updating resources by id with a class method."""

    @classmethod
    @rescue_client_error(False)
    def update(cls, client, attributes=None, **kwargs):
        """Updates the resource identified by the ``id`` member of the given
        attribute data with the rest of it.

        Only the given data is sent, in a single ``PUT`` request, and the
        resource is not fetched first. Returns whether the update succeeded.

        """
        data = dict(attributes or {})
        data.update(kwargs)
        resource_id = data.pop('id', None)
        if resource_id is None and not cls.is_singular:
            raise ValueError('No id given to update %s' % cls.__name__)

        if resource_id is None:
            resource = cls(client)
        else:
            resource = cls(client, id=resource_id)
        resource.attributes.update(data)
        return resource.save()

    @classmethod
    def update_or_raise(cls, client, attributes=None, **kwargs):
        """Updates a resource as with `update()`, raising an
        `OperationFailed` exception if it could not be updated."""
        if not cls.update(client, attributes, **kwargs):
            data = dict(attributes or {})
            data.update(kwargs)
            raise OperationFailed('Update failed %s %r' % (cls.__name__, data))
        return True


class Destroy(object):

    """Deleting resources.

    Once a resource has been destroyed it stays destroyed: it cannot be
    saved or destroyed again.

    """

    _destroyed = False

    @property
    def destroyed(self):
        """Whether the resource was deleted through the API."""
        return self._destroyed

    @rescue_client_error(False)
    def destroy(self):
        """Deletes the resource through the API with a ``DELETE`` request.

        Returns `False` without making a request if the resource was already
        destroyed or was never saved. Otherwise the resource is marked
        destroyed once the request succeeds, whatever the response says.

        """
        if self.destroyed or self.new_record:
            return False
        self.client.connection.request('DELETE', self.url or self.path())
        self._destroyed = True
        return True

    def destroy_or_raise(self):
        """Deletes the resource as with `destroy()`, raising an
        `OperationFailed` exception if it was not deleted."""
        if not self.destroy():
            raise OperationFailed('Destroy failed %s %r'
                % (type(self).__name__, self.get('id')))
        return True

    @classmethod
    @rescue_client_error(False)
    def delete(cls, client, **options):
        """Deletes the resource identified by the keyword parameter `id`
        without fetching it.

        Optional keyword parameter `association` gives the resource's path as
        with `Read.find()`; other keyword parameters are sent as query
        parameters. Returns whether the request succeeded.

        """
        association = options.pop('association', None)
        if association is None:
            association = remoteresources.associations.Association(cls)
        path = association.generate_path(options=options)
        client.connection.request('DELETE', path, params=options)
        return True
