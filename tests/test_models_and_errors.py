import pytest

from package_versions.errors import (
    EmissionError,
    ErrorCode,
    LockfileError,
    PackageNotFoundError,
    ValidationError,
)
from package_versions.models import (
    LockedPackage,
    RootAliasPackage,
    RootPackage,
    resolve_root_alias,
    version_identifier,
)


def test_version_identifier_joins_version_and_reference() -> None:
    assert version_identifier("1.2.3", "deadbeef") == "1.2.3@deadbeef"
    assert version_identifier("1.2.3", "") == "1.2.3@"


def test_locked_package_falls_back_to_dist_reference() -> None:
    package = LockedPackage.from_record(
        {"name": "acme/log", "version": "1.0.0", "dist": {"reference": "xyz"}},
    )
    assert package.source_reference == "xyz"


def test_locked_package_keeps_empty_source_reference_over_dist() -> None:
    package = LockedPackage.from_record(
        {
            "name": "acme/log",
            "version": "1.0.0",
            "source": {"reference": ""},
            "dist": {"reference": "xyz"},
        },
    )
    assert package.source_reference == ""


def test_locked_package_without_name_is_rejected() -> None:
    with pytest.raises(LockfileError):
        LockedPackage.from_record({"version": "1.0.0"})


def test_locked_package_record_must_be_an_object() -> None:
    with pytest.raises(LockfileError):
        LockedPackage.from_record(["acme/log", "1.0.0"])


def test_nested_aliases_resolve_to_innermost_package() -> None:
    real = RootPackage(name="acme/real", version="dev-main", source_reference="f00d")
    inner = RootAliasPackage(name="acme/inner-alias", version="1.x-dev", alias_of=real)
    outer = RootAliasPackage(name="acme/outer-alias", version="1.0.x-dev", alias_of=inner)

    assert resolve_root_alias(outer) is real
    assert outer.source_reference == "f00d"


def test_non_alias_root_resolves_to_itself() -> None:
    root = RootPackage(name="acme/app", version="1.0.0")
    assert resolve_root_alias(root) is root


def test_error_codes_are_stable_and_machine_readable() -> None:
    errors = [
        ValidationError("bad input"),
        LockfileError("lock unreadable"),
        EmissionError("write failed"),
        PackageNotFoundError("acme/missing"),
    ]
    assert [error.code for error in errors] == [
        ErrorCode.VALIDATION.value,
        ErrorCode.LOCKFILE.value,
        ErrorCode.EMISSION.value,
        ErrorCode.NOT_FOUND.value,
    ]


def test_error_string_includes_hint_and_context() -> None:
    error = LockfileError(
        "Lock file does not exist.",
        hint="Run install first.",
        context={"path": "composer.lock"},
    )
    rendered = str(error)

    assert "Hint: Run install first." in rendered
    assert "path: composer.lock" in rendered
    assert error.to_dict()["code"] == "E_LOCKFILE"


def test_package_not_found_is_a_lookup_error() -> None:
    error = PackageNotFoundError("acme/missing")

    assert isinstance(error, LookupError)
    assert error.package_name == "acme/missing"
    assert '"acme/missing"' in str(error)


def test_error_code_comes_from_the_error_class() -> None:
    assert ValidationError.error_code is ErrorCode.VALIDATION
    assert EmissionError("write failed", context={"path": "versions.py"}).to_dict() == {
        "code": "E_EMISSION",
        "message": "write failed",
        "context": {"path": "versions.py"},
    }
