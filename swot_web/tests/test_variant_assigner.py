import random

from swot_web.domain.models import Variant
from swot_web.services.variant_assigner import VariantAssigner


def test_threshold_maps_below_half_to_a():
    assert VariantAssigner(random_source=lambda: 0.0).assign() is Variant.A
    assert VariantAssigner(random_source=lambda: 0.4999).assign() is Variant.A
    assert VariantAssigner(random_source=lambda: 0.5).assign() is Variant.B
    assert VariantAssigner(random_source=lambda: 0.9999).assign() is Variant.B


def test_assignment_is_fair_over_many_draws():
    assigner = VariantAssigner(random_source=random.Random(20240601).random)
    n = 10_000
    a_count = sum(1 for _ in range(n) if assigner.assign() is Variant.A)
    assert abs(a_count / n - 0.5) <= 0.02


def test_default_source_produces_both_labels():
    assigner = VariantAssigner()
    seen = {assigner.assign() for _ in range(200)}
    assert seen == {Variant.A, Variant.B}


def test_parse_variant():
    assert Variant.parse("A") is Variant.A
    assert Variant.parse("B") is Variant.B
    assert Variant.parse("a") is None
    assert Variant.parse("X") is None
    assert Variant.parse(None) is None
