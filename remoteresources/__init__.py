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

remoteresources are real subclassable Python objects that persist themselves
to a JSON REST API.

You define the resources of an API as `Resource` classes with their fields
and associations. Resources then support finding, creating, updating and
destroying through the basic HTTP verbs.

remoteresources have:

* change tracking, so that saving a resource sends only what changed

* associations between resources, saved before (or inlined into) the save
  of the resource that owns them

* merging of the server's response back into the saved resource

* failures reported as false results, with ``_or_raise`` variants for
  callers that prefer exceptions


Example
=======

For example, you can build a simplified help desk API library in the shell::

    >>> from remoteresources import Client, Resource, associations, fields
    >>> class User(Resource):
    ...     name  = fields.Field()
    ...     email = fields.Field()
    ...
    >>> class Ticket(Resource):
    ...     subject   = fields.Field()
    ...     requester = associations.HasOne(User, inline='create')
    ...
    >>> client = Client(url='https://example.com/api/v2/', username='fred',
    ...                 token='abc123')
    >>> ticket = Ticket(client, subject='Printer on fire')
    >>> ticket.requester = User(client, name='Molly', email='molly@example.com')
    >>> ticket.save()
    True

The new requester is sent inside the ticket's own ``POST`` request, and the
ticket's attributes are updated with the server's response.

"""

__version__ = '1.0'
__author__ = 'Six Apart Ltd.'

import remoteresources.dataobject
import remoteresources.fields as fields
import remoteresources.associations as associations
from remoteresources import errors
from remoteresources.client import Client
from remoteresources.collection import Collection
from remoteresources.configuration import Configuration
from remoteresources.resource import (DataResource, ReadResource, Resource,
    SingularResource)
from remoteresources.trackeddict import TrackedDict

__all__ = ('Client', 'Collection', 'Configuration', 'DataResource',
    'ReadResource', 'Resource', 'SingularResource', 'TrackedDict',
    'associations', 'errors', 'fields')
