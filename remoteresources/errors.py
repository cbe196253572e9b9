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

Exceptions raised by `remoteresources` operations.

Failed HTTP exchanges are all `ClientError` subclasses. Lifecycle operations
rescue them (see `remoteresources.rescue`) and report failure as a false or
`None` result; the ``_or_raise`` variants of those operations turn such a
result into an `OperationFailed` exception instead.

"""


class ClientError(Exception):
    """An exception representing a failed exchange with the remote API.

    If the failure came with an HTTP response, its status code is available
    as the `status` attribute and its decoded body as `body`.

    """

    def __init__(self, message, status=None, body=None):
        super(ClientError, self).__init__(message)
        self.status = status
        self.body = body


class NetworkError(ClientError):
    """A `ClientError` thrown when no HTTP response could be had at all, as
    when the connection is refused or times out."""
    pass


class NotFound(ClientError):
    """A `ClientError` thrown when the server reports that the requested
    resource was not found."""
    pass


class Unauthorized(ClientError):
    """A `ClientError` thrown when the server reports that the requested
    resource is not available through an unauthenticated request.

    This exception corresponds to the HTTP status code 401.

    """
    pass


class Forbidden(ClientError):
    """A `ClientError` thrown when the server reports that the client, as
    authenticated, is not authorized to request the requested resource.

    This exception corresponds to the HTTP status code 403.

    """
    pass


class PreconditionFailed(ClientError):
    """A `ClientError` thrown when the server reports that some of the
    conditions in a conditional request were not true.

    This exception corresponds to the HTTP status code 412.

    """
    pass


class RequestError(ClientError):
    """A `ClientError` thrown when the server reports an error in the
    client's request.

    This exception corresponds to the HTTP status code 400.

    """
    pass


class RecordInvalid(RequestError):
    """A `RequestError` thrown when the server refuses to store a resource
    because of its content.

    This exception corresponds to the HTTP status code 422. The server's
    description of what was wrong, if any, is available as `errors`.

    """

    def __init__(self, message, status=None, body=None):
        super(RecordInvalid, self).__init__(message, status=status, body=body)
        self.errors = {}
        if isinstance(body, dict):
            self.errors = body.get('details') or body.get('errors') or {}


class ServerError(ClientError):
    """A `ClientError` thrown when the server reports an unexpected error.

    This exception corresponds to the HTTP status codes 500 and above.

    """
    pass


class BadResponse(ClientError):
    """A `ClientError` thrown when the client receives some other
    non-success HTTP response, or a response it cannot decode."""
    pass


class OperationFailed(Exception):
    """An exception thrown by the ``_or_raise`` variants of the lifecycle
    operations when the operation reported failure."""
    pass
