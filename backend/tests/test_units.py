from app.models import CalculatorForm
from app.units import cm_to_m, mm_to_m, mpa_to_pa, normalize_units_to_si, round_to_3
from penetration import SIInputRecord


def test_round_to_3_rounds_to_nearest():
    assert round_to_3(0.9199999) == 0.92
    assert round_to_3(0.0014) == 0.001
    assert round_to_3(0.0016) == 0.002


def test_unit_conversions():
    assert cm_to_m(150) == 1.5
    assert mm_to_m(4) == 0.004
    assert mpa_to_pa(2.5) == 2_500_000


def test_sub_millimetre_precision_is_lost():
    assert mm_to_m(0.4) == 0
    assert mm_to_m(0.5) == 0.001


def test_normalize_units_to_si(form_values, si_payload):
    record = normalize_units_to_si(CalculatorForm.model_validate(form_values))
    assert record == SIInputRecord.from_mapping(si_payload)
