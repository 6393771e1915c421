"""
# Expose &inettime.test.library.Test instances to pytest collected tests.
"""
import pytest

from inettime.test import library as libtest

@pytest.fixture
def test(request):
	t = libtest.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
