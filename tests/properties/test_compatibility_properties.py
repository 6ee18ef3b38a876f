"""Property-based tests for resolution and compatibility checking.

Verifies:
- Alias lookup is total over the alias table and ignores case.
- Resolving the same reference twice yields the same names.
- Array decoration never changes what a reference resolves to.
- An unresolvable name yields exactly one finding, whatever the targets.
- A name missing from M of N targets yields exactly M findings.
- A catalog with no valid platforms never reports anything.
"""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from typecompat.core.checker import CompatibilityChecker, FindingKind
from typecompat.core.platforms import build_catalog
from typecompat.core.references import CustomTypeRegistry, SourceLocation, TypeReference
from typecompat.core.resolver import NameOrigin, NameResolver
from tests.helpers import ALIASES, CORE_LINUX, CORE_NANO, DESKTOP, make_source


# ---------------------------------------------------------------------------
# Shared catalog and strategies
# ---------------------------------------------------------------------------

ALL_PLATFORMS = [DESKTOP, CORE_LINUX, CORE_NANO]
CATALOG = build_catalog(ALL_PLATFORMS, make_source())
RESOLVER = NameResolver(CATALOG)
CHECKER = CompatibilityChecker(CATALOG)
LOCATION = SourceLocation(1, 1, 1, 10)

aliases = st.sampled_from(sorted(ALIASES))
targets = st.lists(st.sampled_from(ALL_PLATFORMS), min_size=1, max_size=3, unique=True)
unknown_names = st.from_regex(r"Zz[a-z]{1,8}", fullmatch=True)
resolvable_names = st.sampled_from([
    "string", "Int", "Random", "Collections.Hashtable", "Collections.ArrayList",
    "System.Guid", "Microsoft.Win32.Registry",
])


@st.composite
def mixed_case(draw: st.DrawFn, text: str) -> str:
    flips = draw(st.lists(st.booleans(), min_size=len(text), max_size=len(text)))
    return "".join(c.upper() if flip else c.lower() for c, flip in zip(text, flips))


type_references = st.recursive(
    st.one_of(resolvable_names, unknown_names).map(TypeReference.simple),
    lambda inner: st.one_of(
        inner.map(TypeReference.array_of),
        st.builds(
            TypeReference.generic,
            st.one_of(resolvable_names, unknown_names),
            st.lists(inner, min_size=1, max_size=3).map(tuple),
        ),
    ),
    max_leaves=6,
)

command_arguments = st.lists(
    st.one_of(resolvable_names, unknown_names), min_size=1, max_size=4
).map(lambda parts: f"{parts[0]}[{','.join(parts[1:])}]" if len(parts) > 1 else parts[0])


def findings_for(name: str, target_keys: list[str]):
    reference = TypeReference.simple(name, location=LOCATION)
    pairs = [(reference, n) for n in RESOLVER.resolve(reference)]
    return CHECKER.check(pairs, CustomTypeRegistry(), target_keys)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestResolutionProperties:

    @given(data=st.data(), alias=aliases)
    @settings(max_examples=50)
    def test_alias_lookup_ignores_case(self, data: st.DataObject, alias: str) -> None:
        written = data.draw(mixed_case(alias))
        (name,) = RESOLVER.resolve(TypeReference.simple(written))
        assert name.origin is NameOrigin.ACCELERATOR
        assert name.full_name == ALIASES[alias]
        assert name.alias == written

    @given(reference=st.one_of(type_references, command_arguments.map(TypeReference.from_command)))
    def test_resolution_is_idempotent(self, reference: TypeReference) -> None:
        first = RESOLVER.resolve(reference)
        assert first
        assert RESOLVER.resolve(reference) == first

    @given(name=st.one_of(resolvable_names, unknown_names), depth=st.integers(1, 4))
    def test_arrays_resolve_like_their_element(self, name: str, depth: int) -> None:
        plain = TypeReference.simple(name)
        wrapped = plain
        for _ in range(depth):
            wrapped = TypeReference.array_of(wrapped)
        assert RESOLVER.resolve(wrapped) == RESOLVER.resolve(plain)


# ---------------------------------------------------------------------------
# Checking
# ---------------------------------------------------------------------------


class TestCheckerProperties:

    @given(name=unknown_names, target_keys=targets)
    def test_unresolved_reported_once(self, name: str, target_keys: list[str]) -> None:
        findings = findings_for(name, target_keys)
        assert len(findings) == 1
        assert findings[0].kind is FindingKind.UNRESOLVED
        assert findings[0].platform_key is None

    @given(target_keys=targets)
    def test_incompatible_once_per_failing_target(self, target_keys: list[str]) -> None:
        findings = findings_for("System.Windows.Forms.Form", target_keys)
        failing = [key for key in target_keys if key != DESKTOP]
        assert [f.platform_key for f in findings] == failing
        assert all(f.kind is FindingKind.INCOMPATIBLE for f in findings)

    @given(
        keys=st.lists(st.sampled_from(["", "core", "core-6.1.0", "mac-1.0-osx", "desktop--windows"]), max_size=4),
        name=st.one_of(resolvable_names, unknown_names),
    )
    def test_invalid_platforms_never_report(self, keys: list[str], name: str) -> None:
        catalog = build_catalog(keys, make_source())
        assert not catalog.ready
        reference = TypeReference.simple(name, location=LOCATION)
        assert CompatibilityChecker(catalog).check_references([reference], CustomTypeRegistry()) == []
