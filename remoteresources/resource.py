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

from remoteresources import errors, fields
from remoteresources.actions import Create, Destroy, Read, Update
from remoteresources.associations import Association
from remoteresources.dataobject import DataObject


class DataResource(DataObject):

    """A `DataObject` that is a resource of a remote API.

    A resource is reached through a `Client`, and through the `Association`
    giving its path (by default, the flat path named by its class's
    `resource_name`). A resource with no id is new: it has not been saved.

    `DataResource` itself has no lifecycle operations; those are mixed in by
    the classes in `remoteresources.actions`, as in `Resource`.

    """

    ClientError        = errors.ClientError
    NetworkError       = errors.NetworkError
    NotFound           = errors.NotFound
    Unauthorized       = errors.Unauthorized
    Forbidden          = errors.Forbidden
    PreconditionFailed = errors.PreconditionFailed
    RequestError       = errors.RequestError
    RecordInvalid      = errors.RecordInvalid
    ServerError        = errors.ServerError
    BadResponse        = errors.BadResponse

    is_singular = False

    id = fields.Field()

    def __init__(self, client, attributes=None, association=None, **kwargs):
        """Initializes a resource with the given attribute data.

        Data given with an id is taken to be the state of an existing
        resource, so it is not tracked as changes.

        """
        self.client = client
        if association is None:
            association = Association(type(self))
        self.association = association
        super(DataResource, self).__init__(attributes, **kwargs)
        if self.id is not None:
            self.attributes.clear_changes()

    @classmethod
    def from_dict(cls, client, data, association=None):
        """Decodes a dictionary of data received from the API into a new
        resource with no pending changes."""
        self = cls(client, data, association=association)
        self.attributes.clear_changes()
        return self

    @property
    def new_record(self):
        """Whether the resource has not been saved yet."""
        return self.id is None and not self.is_singular

    @property
    def url(self):
        """The resource's own URL, if the API provided one."""
        return self.attributes.get('url')

    def path(self, with_id=True):
        """Returns the path of the resource, or without its id, the path of
        its collection."""
        return self.association.generate_path(self, with_id=with_id)

    def __eq__(self, other):
        """Returns whether two resources are the same resource: resources of
        the same class with the same id, or with no ids and the same data."""
        if type(self) != type(other):
            return False
        if self.id is not None or other.id is not None:
            return self.id == other.id
        return self.attributes == other.attributes

    __hash__ = DataObject.__hash__

    def __repr__(self):
        return '<%s %s %r>' % (type(self).__name__,
            'new' if self.id is None else self.id, self.attributes.to_dict())


class ReadResource(Read, DataResource):
    """A resource that can be found, but not changed."""
    pass


class Resource(Read, Create, Update, Destroy, DataResource):

    """A resource that can be found, created, updated and destroyed.

    For example:

    >>> class Ticket(Resource):
    ...     subject   = fields.Field()
    ...     requester = associations.HasOne('User', inline='create')
    ...     comments  = associations.HasMany('Comment')
    ...
    >>> ticket = Ticket.find(client, id=7)
    >>> ticket.subject = 'Printer on fire'
    >>> ticket.save()
    True

    """

    pass


class SingularResource(Resource):

    """A resource of which the API has exactly one, such as the current
    account's settings.

    A singular resource has no id in its path, needs none to be found, and is
    never new: saving it always updates it.

    """

    is_singular = True
