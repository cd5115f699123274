from rustcraft.packages import Dependency, Language, Package, PackageBuilder


def test_defaults():
    package = PackageBuilder("base64").build()
    assert package == Package(
        name="base64",
        version="0.1",
        authors=[],
        dependencies=[],
        language=None,
    )


def test_version_and_language():
    package = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    assert package.version == "0.4"
    assert package.language is Language.RUST


def test_as_dependency():
    package = PackageBuilder("base64").version("0.13").build()
    assert package.as_dependency() == Dependency(
        name="base64", version_expression="0.13"
    )


def test_full_build():
    base64 = PackageBuilder("base64").version("0.13").build()
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    assert serde.name == "serde"
    assert serde.authors == ["djmitche"]
    assert serde.version == "4.0"
    assert serde.dependencies == [base64.as_dependency(), log.as_dependency()]
    assert serde.language is None


def test_authors_replaces_previous():
    package = PackageBuilder("p").authors(["a", "b"]).authors(["c"]).build()
    assert package.authors == ["c"]


def test_dependencies_keep_order():
    first = Dependency("one", "1")
    second = Dependency("two", "2")
    package = PackageBuilder("p").dependency(first).dependency(second).build()
    assert package.dependencies == [first, second]


def test_built_packages_are_independent():
    builder = PackageBuilder("p").dependency(Dependency("one", "1"))
    first = builder.build()
    builder.dependency(Dependency("two", "2"))
    second = builder.build()
    assert len(first.dependencies) == 1
    assert len(second.dependencies) == 2


def test_builder_methods_chain_on_same_builder():
    builder = PackageBuilder("p")
    assert builder.version("2") is builder
    assert builder.language(Language.PERL) is builder
    assert builder.build().language is Language.PERL