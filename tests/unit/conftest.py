import os

from pytest import fixture
from hypothesis import settings, HealthCheck

from mediatype.core import MediaType

# From:
# http://hypothesis.readthedocs.io/en/latest/settings.html#settings-profiles
# On CI we'll have it run through more iterations.
settings.register_profile(
    'ci', settings(max_examples=2000,
                   suppress_health_check=[HealthCheck.too_slow]),
)
# When you're developing locally, we'll only run a few examples
# to keep unit tests fast.  If you want to run more iterations
# locally just set HYPOTHESIS_PROFILE=ci.
settings.register_profile('dev', settings(max_examples=10))
settings.load_profile(os.getenv('HYPOTHESIS_PROFILE', 'dev'))


@fixture
def html_utf8():
    return MediaType.create('text', 'html', {'charset': 'utf-8'})


@fixture
def multipart():
    return MediaType.parse(
        'multipart/form-data; boundary="a;b"; charset=utf-8')
