import logging

import httplib2
import mock

from remoteresources import Client
from remoteresources.http import Connection, Response


def mock_http(resp_or_content):
    """Returns a mock `httplib2.Http` that answers its request with the
    given response.

    Parameter `resp_or_content` is either the response content, for a
    successful JSON response, or a dictionary of response headers with the
    content as its ``content`` member.

    """
    http = mock.NonCallableMock(spec_set=httplib2.Http)

    default_response = {
        'status':       200,
        'content-type': 'application/json',
    }

    if isinstance(resp_or_content, dict):
        response = dict(resp_or_content)
        content = response.pop('content', '')
        status = response.get('status', 200)
        if 200 <= status < 300:
            response_info = dict(default_response)
            response_info.update(response)
        else:
            # Homg all bets are off!! Use specified headers only.
            response_info = response
    else:
        response_info = dict(default_response)
        content = resp_or_content

    http.request.return_value = (httplib2.Response(response_info), content)
    return http


def mock_client(*responses, **settings):
    """Returns a client whose connection answers its requests with the
    given responses (or raises them, if they are exceptions) in order."""
    settings.setdefault('url', 'https://example.com/api/v2/')
    client = Client(**settings)
    client.connection = mock.NonCallableMock(spec_set=Connection)
    client.connection.request.side_effect = list(responses)
    return client


def response(body=None, status=200):
    return Response(status, {}, body)


def log():
    import sys
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(asctime)s %(levelname)s %(message)s")
