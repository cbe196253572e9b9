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

import logging
from urllib.parse import urlparse

import remoteresources


class Configuration(object):

    """The settings a `Client` uses to talk to a remote API.

    Parameter `url` is the base URL of the API; resource paths are resolved
    relative to it. Unless `allow_http` is set, it must be an ``https`` URL.

    Authentication is by `username` and `password`, by `username` and API
    `token` (sent as the password of the user ``<username>/token``), or by an
    OAuth `access_token`.

    Set `raise_error` to have lifecycle operations raise their
    `remoteresources.errors.ClientError` exceptions instead of logging them
    and returning a false result.

    Optional `timeout` and `cache` are passed to the `httplib2.Http` instance
    the client creates, and `headers` are sent with every request.

    """

    user_agent = 'remoteresources/%s' % remoteresources.__version__

    def __init__(self, url=None, username=None, password=None, token=None,
                 access_token=None, logger=None, raise_error=False,
                 timeout=None, cache=None, headers=None, allow_http=False,
                 user_agent=None):
        if not url:
            raise ValueError('A url is required to configure a client')
        scheme = urlparse(url).scheme
        if scheme not in ('http', 'https'):
            raise ValueError('Url %r is not an http(s) url' % (url,))
        if scheme == 'http' and not allow_http:
            raise ValueError('Url %r must use https; pass allow_http=True to'
                ' permit plain http' % (url,))

        self.url = url
        self.username = username
        self.password = password
        self.token = token
        self.access_token = access_token
        self.raise_error = raise_error
        self.timeout = timeout
        self.cache = cache
        self.headers = dict(headers or {})
        self.allow_http = allow_http
        if user_agent is not None:
            self.user_agent = user_agent

        if logger is None:
            logger = logging.getLogger('remoteresources')
        self.logger = logger

    def credentials(self):
        """Returns the ``(user, password)`` pair for basic authentication, or
        `None` if the configuration has no basic credentials."""
        if self.username is None:
            return None
        if self.token is not None:
            return ('%s/token' % self.username, self.token)
        if self.password is not None:
            return (self.username, self.password)
        return None
