import databricks.labs.urlpath
from databricks.labs.urlpath import ExternalPath, StructuralPath, UrlPath, canonicalize


def test_public_api() -> None:
    """Ensure that the public API is available from the package itself."""
    assert set(databricks.labs.urlpath.__all__) == {
        "ExternalPath",
        "StructuralPath",
        "UrlPath",
        "__version__",
        "canonicalize",
    }
    assert isinstance(UrlPath("md/README.md"), StructuralPath)
    assert isinstance(UrlPath("https://example.com"), ExternalPath)
    assert canonicalize("md/../README.md") == (None, "README.md")
