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

import functools

from remoteresources.errors import ClientError


def client_for(target, args):
    """Returns the client an operation on `target` works with: the first
    argument of a class method, or the instance's own client."""
    if isinstance(target, type):
        return args[0] if args else None
    return getattr(target, 'client', None)


def rescue_client_error(fallback=None):
    """Decorates a method so that the `ClientError` exceptions it raises are
    logged and turned into the return value `fallback` instead.

    The error is logged on the logger of the client the method works with.
    If that client's configuration sets `raise_error`, the error is logged
    and raised anyway.

    Use it on instance methods and, below a `classmethod` decorator, on class
    methods whose first argument is the client:

    >>> class Ticket(Resource):
    ...     @classmethod
    ...     @rescue_client_error(None)
    ...     def recent(cls, client):
    ...         ...

    """
    def decorate(fn):
        @functools.wraps(fn)
        def rescued(target, *args, **kwargs):
            try:
                return fn(target, *args, **kwargs)
            except ClientError as exc:
                client = client_for(target, args)
                if client is None:
                    raise
                client.logger.warning('%s.%s failed: %s',
                    getattr(target, '__name__', type(target).__name__),
                    fn.__name__, exc)
                if client.config.raise_error:
                    raise
                return fallback
        return rescued
    return decorate
