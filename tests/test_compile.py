

def test_compile():
    # Base modules must import with only the standard library available
    import geodirect
    import geodirect.conversion
    import geodirect.coordinates
    import geodirect.direct
    import geodirect.ellipsoid
    import geodirect.exceptions
    import geodirect.utils.logging
    import geodirect.utils.mixins

    assert geodirect.LOGGER.name == 'geodirect'


def test_version():
    from geodirect import __version__

    assert __version__ is not None
    assert not __version__.startswith('v')
