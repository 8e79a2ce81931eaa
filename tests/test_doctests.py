import doctest

import pytest

from titanint.titanic import utils, words


@pytest.mark.parametrize('module', [utils, words], ids=lambda m: m.__name__)
def test_doctests(module):
    failures, tests = doctest.testmod(module)
    assert tests > 0
    assert failures == 0
