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

from remoteresources.collection import Collection
from remoteresources.configuration import Configuration
from remoteresources.http import Connection


class Client(object):

    """The entry point to a remote API.

    A client holds the `Configuration` of the API and the `Connection`
    requests are made through. Resources are given the client they work with
    explicitly:

    >>> client = Client(url='https://example.com/api/v2/', username='fred',
    ...                 token='abc123')
    >>> ticket = Ticket.find(client, id=7)

    Keyword parameters are used to make a `Configuration` when none is given.
    Optional parameter `http` is the `httplib2.Http` compatible user agent the
    connection makes requests with.

    """

    def __init__(self, config=None, http=None, **kwargs):
        if config is None:
            config = Configuration(**kwargs)
        elif kwargs:
            raise TypeError('Cannot give both a configuration and settings %r'
                % (sorted(kwargs),))
        self.config = config
        self.connection = Connection(config, http=http)

    @property
    def logger(self):
        return self.config.logger

    def collection(self, resource_class, **options):
        """Returns an undelivered `Collection` of the resources of the given
        class, filtered by the given query parameters."""
        return Collection(self, resource_class, options=options)

    def __repr__(self):
        return '<Client %s>' % (self.config.url,)
