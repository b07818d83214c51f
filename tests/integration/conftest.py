"""Fake GitHub REST API for integration tests."""

import json
import re
from unittest.mock import Mock, patch

import pytest


class FakeGitHub:
    """
    Stands in for ``requests.Session.request`` and records every call.

    Only the endpoints the validator uses are routed; anything else
    answers 404.
    """

    def __init__(self, files=None, reviews=None):
        self.files = files or []
        self.reviews = reviews or []
        self.calls = []
        self.next_review_id = 1000
        self.fail_on = None

    def __call__(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs.get('json')))

        if self.fail_on and self.fail_on in url:
            return self._response(500, {"message": "Server Error"})

        if method == 'GET' and re.search(r'/pulls/\d+/files$', url):
            return self._page(self.files, kwargs.get('params') or {})

        if method == 'GET' and re.search(r'/pulls/\d+/reviews$', url):
            return self._page(self.reviews, kwargs.get('params') or {})

        if method == 'POST' and re.search(r'/pulls/\d+/reviews$', url):
            self.next_review_id += 1
            return self._response(200, {"id": self.next_review_id, **kwargs['json']})

        match = re.search(r'/pulls/\d+/reviews/(\d+)$', url)
        if method == 'PUT' and match:
            return self._response(200, {"id": int(match.group(1)), **kwargs['json']})

        return self._response(404, {"message": "Not Found"})

    def _page(self, items, params):
        page = params.get('page', 1)
        per_page = params.get('per_page', 30)
        return self._response(200, items[(page - 1) * per_page:page * per_page])

    @staticmethod
    def _response(status_code, payload):
        response = Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        response.json.return_value = payload
        response.content = json.dumps(payload).encode()
        response.headers = {}
        return response

    def requests_to(self, method, suffix=''):
        return [call for call in self.calls if call[0] == method and call[1].endswith(suffix)]

    def created_reviews(self):
        return [body for method, url, body in self.calls if method == 'POST' and url.endswith('/reviews')]

    @staticmethod
    def file_entry(path, status='modified'):
        return {
            'filename': path,
            'status': status,
            'blob_url': f"https://github.com/acme/app/blob/abc123/{path}",
        }

    @staticmethod
    def bot_review(review_id, body, state='COMMENTED', login='github-actions[bot]'):
        return {'id': review_id, 'user': {'login': login}, 'body': body, 'state': state}


@pytest.fixture
def fake_github():
    """Patch the requests session with a FakeGitHub."""
    fake = FakeGitHub()
    with patch('requests.Session.request', side_effect=fake):
        yield fake
