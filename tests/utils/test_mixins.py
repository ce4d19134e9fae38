
import logging

from geodirect.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


def test_logging_mixin(caplog):
    foo = Foo()
    assert foo.logger.name == f'{__name__}.Foo'

    foo = Foo('bar')
    assert foo.logger.name == f'{__name__}.Foo.bar'

    with caplog.at_level(logging.INFO, logger=foo.logger.name):
        foo.logger.info('test %s', 'test')
    assert 'test test' in caplog.text
