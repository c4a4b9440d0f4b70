import pytest

from rendering.formats import ContentFormat


@pytest.fixture
def store():
    """Stand-in for the browser's localStorage / a Django session."""
    return {}


@pytest.fixture(params=list(ContentFormat))
def content_format(request):
    return request.param


@pytest.fixture
def python_block():
    return '<pre><code class="language-python">d = {\'a\': {\'b\': 1}}\n</code></pre>'
