def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import netmime.core.interfaces as I

    assert hasattr(I, "PlatformRegistryProtocol")
    assert hasattr(I, "ExtensionResolverProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_concrete_classes_satisfy_protocols():
    from netmime.adapters import MimetypesPlatformRegistry, NullPlatformRegistry
    from netmime.core import ExtensionResolverProtocol, PlatformRegistryProtocol
    from netmime.data import DEFAULT_TABLES
    from netmime.resolving import ExtensionResolver

    null = NullPlatformRegistry()
    assert isinstance(null, PlatformRegistryProtocol)
    assert isinstance(MimetypesPlatformRegistry(files=[]), PlatformRegistryProtocol)
    assert isinstance(ExtensionResolver(tables=DEFAULT_TABLES, platform=null), ExtensionResolverProtocol)


def test_fakes_satisfy_platform_protocol(fake_platform, exploding_platform):
    from netmime.core import PlatformRegistryProtocol

    assert isinstance(fake_platform, PlatformRegistryProtocol)
    assert isinstance(exploding_platform, PlatformRegistryProtocol)
