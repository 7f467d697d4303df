from sqltrace.exceptions import ImproperConfigurationError, MissingDependencyError, SQLTraceError


def test_exception_hierarchy() -> None:
    assert issubclass(ImproperConfigurationError, SQLTraceError)
    assert issubclass(MissingDependencyError, SQLTraceError)
    assert issubclass(MissingDependencyError, ImportError)


def test_exception_detail() -> None:
    exc = ImproperConfigurationError("Unknown trace mode")
    assert exc.detail == "Unknown trace mode"
    assert str(exc) == "Unknown trace mode"
    assert repr(exc) == "ImproperConfigurationError - Unknown trace mode"


def test_missing_dependency_message() -> None:
    exc = MissingDependencyError(package="click", install_package="cli")
    assert "pip install sqltrace[cli]" in str(exc)
