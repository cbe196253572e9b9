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

The HTTP transport `remoteresources` clients talk to their API through.

A `Connection` makes a request of the API with `httplib2`, codes request and
response bodies as JSON with `simplejson`, and turns unsuccessful responses
into the exceptions of `remoteresources.errors`.

"""

import base64
from datetime import datetime
import http.client
import logging
import socket
from urllib.parse import urlencode, urljoin, urlparse

import httplib2
import simplejson as json

from remoteresources import errors, fields


log = logging.getLogger('remoteresources.http')


def encode_value(value):
    """Encodes values `simplejson` does not know how to encode: resources
    and collections as their parameter representations, and timestamps as
    timestamp strings."""
    if hasattr(value, 'to_param'):
        return value.to_param()
    if isinstance(value, datetime):
        return fields.Datetime().encode(value)
    raise TypeError('%r is not JSON serializable' % (value,))


class Response(object):

    """A decoded response from the API.

    `status` is the HTTP status code, `headers` the `httplib2.Response` (a
    dictionary of lowercased header names) and `body` the decoded JSON
    content (an empty dictionary for an empty response).

    """

    def __init__(self, status, headers=None, body=None):
        self.status = status
        self.headers = headers if headers is not None else {}
        self.body = body if body is not None else {}

    def __repr__(self):
        return '<Response %d %r>' % (self.status, self.body)


class Connection(object):

    """A connection to the API configured by a `Configuration`.

    Optional parameter `http` is the user agent object to use for requests.
    It should be compatible with `httplib2.Http` instances; by default a new
    `httplib2.Http` is made with the configuration's cache and timeout.

    """

    content_types = ('application/json',)

    def __init__(self, config, http=None):
        self.config = config
        if http is None:
            http = httplib2.Http(cache=config.cache, timeout=config.timeout)
        self.http = http

    def build_uri(self, path, params=None):
        """Returns the absolute URL for `path` with the query parameters
        `params`.

        A relative `path` is resolved against the configured base URL; an
        absolute URL is used as it is.

        """
        if urlparse(path).scheme:
            uri = path
        else:
            uri = urljoin(self.config.url.rstrip('/') + '/', path.lstrip('/'))
        if params:
            query = urlencode(sorted(params.items()), doseq=True)
            separator = '&' if urlparse(uri).query else '?'
            uri = uri + separator + query
        return uri

    def get_headers(self, has_body=False):
        headers = dict(self.config.headers)
        headers['accept'] = ', '.join(self.content_types)
        headers['user-agent'] = self.config.user_agent
        if has_body:
            headers['content-type'] = self.content_types[0]

        credentials = self.config.credentials()
        if self.config.access_token is not None:
            headers['authorization'] = 'Bearer %s' % self.config.access_token
        elif credentials is not None:
            token = base64.b64encode(('%s:%s' % credentials).encode('utf-8'))
            headers['authorization'] = 'Basic %s' % token.decode('ascii')
        return headers

    def request(self, method, path, body=None, params=None):
        """Makes a request of the API and returns its decoded `Response`.

        Parameter `body`, if given, is encoded as the JSON request body.
        Parameter `params` is a dictionary of query parameters.

        Raises a `remoteresources.errors.ClientError` for an unsuccessful
        response or if no response could be had.

        """
        uri = self.build_uri(path, params)
        headers = self.get_headers(has_body=body is not None)
        content = None
        if body is not None:
            content = json.dumps(body, default=encode_value)

        log.debug('%s %s', method, uri)
        try:
            response, content = self.http.request(uri=uri, method=method,
                body=content, headers=headers)
        except (httplib2.HttpLib2Error, socket.error) as exc:
            raise errors.NetworkError('Error requesting %s %s: %s'
                % (method, uri, exc)) from exc

        data = self.decode(method, uri, response, content)
        log.debug('%s %s: %d %r', method, uri, response.status, data)
        self.raise_for_response(method, uri, response, data)
        return Response(response.status, response, data)

    def decode(self, method, uri, response, content):
        """Decodes the JSON content of a response, returning an empty
        dictionary if there is none."""
        if isinstance(content, bytes):
            content = content.decode('utf-8', 'replace')
        if not content or not content.strip():
            return {}

        content_type = response.get('content-type', '').split(';', 1)[0].strip()
        if content_type not in self.content_types:
            if 200 <= response.status < 300:
                raise errors.BadResponse(
                    'Bad response requesting %s %s: content-type %s is not an expected type'
                    % (method, uri, response.get('content-type')),
                    status=response.status)
            # Keep the first line of a plain error message.
            return {'error': content.split('\n', 1)[0]}

        try:
            return json.loads(content)
        except ValueError as exc:
            raise errors.BadResponse('Could not decode response requesting %s %s: %s'
                % (method, uri, exc), status=response.status)

    @classmethod
    def raise_for_response(cls, method, uri, response, data):
        """Raises exceptions corresponding to unsuccessful HTTP responses.

        Override this method to customize the error handling behavior of
        the connection for your target API.

        """
        status = response.status
        if 200 <= status < 300 or status == http.client.NOT_MODIFIED:
            return

        reason = getattr(response, 'reason', '') or http.client.responses.get(status, '')
        message = '%d %s requesting %s %s' % (status, reason, method, uri)
        if isinstance(data, dict) and data.get('error'):
            message = '%s: %s' % (message, data['error'])

        if status == http.client.NOT_FOUND:
            err_cls = errors.NotFound
        elif status == http.client.UNAUTHORIZED:
            err_cls = errors.Unauthorized
        elif status == http.client.FORBIDDEN:
            err_cls = errors.Forbidden
        elif status == http.client.PRECONDITION_FAILED:
            err_cls = errors.PreconditionFailed
        elif status == 422:
            err_cls = errors.RecordInvalid
        elif status == http.client.BAD_REQUEST:
            err_cls = errors.RequestError
        elif status >= 500:
            err_cls = errors.ServerError
        else:
            err_cls = errors.BadResponse
        raise err_cls(message, status=status, body=data)
