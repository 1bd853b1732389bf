import copy
import math
import pickle

import pytest

from quant_calc_parameter.basics.measure import Measures
from quant_calc_parameter.basics.standard_id import StandardId
from quant_calc_parameter.parameter.counterparty import TradeCounterpartyCalculationParameter
from quant_calc_parameter.parameter.discount_curve import DiscountCurveParameter, FlatDiscountCurve
from quant_calc_parameter.parameter.parameter import CalculationParameter
from quant_calc_parameter.parameter.parameters import CalculationParameters
from quant_calc_parameter.product.position import Position
from quant_calc_parameter.product.trade import Trade, TradeInfo

REF = "2026-01-02"


class ModelChoice(CalculationParameter):
    def __init__(self, model):
        self.model = model


@pytest.fixture()
def ois():
    return DiscountCurveParameter.flat("USD-OIS", 0.04, REF)


@pytest.fixture()
def csa():
    return DiscountCurveParameter.flat("USD-CSA", 0.05, REF)


def test_flat_curve_discount_and_zero_rate():
    curve = FlatDiscountCurve(0.05, REF)

    assert curve.discount(REF) == pytest.approx(1.0)
    assert curve.discount("2027-01-02") == pytest.approx(math.exp(-0.05), rel=1e-9)
    assert curve.zero_rate("2027-01-02") == pytest.approx(0.05, rel=1e-9)


def test_flat_curve_equality():
    assert FlatDiscountCurve(0.05, REF) == FlatDiscountCurve(0.05, "2026-01-02")
    assert FlatDiscountCurve(0.05, REF) != FlatDiscountCurve(0.04, REF)


def test_discount_curve_parameter_defaults(ois):
    assert ois.query_type is DiscountCurveParameter
    assert ois.filter(Trade(), Measures.PRESENT_VALUE) is ois
    assert ois == DiscountCurveParameter.flat("USD-OIS", 0.04, REF)


def test_discount_curve_parameter_measure_restriction():
    param = DiscountCurveParameter.flat("USD-OIS", 0.04, REF, measures=[Measures.PRESENT_VALUE])

    assert param.filter(Trade(), Measures.PRESENT_VALUE) is param
    assert param.filter(Trade(), Measures.PAR_RATE) is None


def test_discount_curve_parameter_requires_name():
    with pytest.raises(ValueError):
        DiscountCurveParameter(name="", curve=FlatDiscountCurve(0.04, REF))


def test_counterparty_routing_of_discount_curves(ois, csa):
    bank_a = StandardId.of("OG-Counterparty", "BANK-A")
    sel = TradeCounterpartyCalculationParameter.of({bank_a: csa}, ois)

    chosen = sel.filter(Trade(info=TradeInfo(counterparty=bank_a)), Measures.PRESENT_VALUE)
    assert chosen is csa
    assert chosen.curve.discount("2027-01-02") == pytest.approx(math.exp(-0.05), rel=1e-9)
    assert sel.query_type is DiscountCurveParameter


def test_counterparty_rejects_other_parameter_type(ois):
    with pytest.raises(ValueError, match="DiscountCurveParameter"):
        TradeCounterpartyCalculationParameter.of({"OG-Counterparty~A": ModelChoice("BS")}, ois)


def test_parameters_find(ois, csa):
    sel = TradeCounterpartyCalculationParameter.of({"OG-Counterparty~A": csa}, ois)
    model = ModelChoice("BS")
    params = CalculationParameters.of(sel, model)
    trade = Trade(info=TradeInfo(counterparty="OG-Counterparty~A"))

    assert len(params) == 2
    assert DiscountCurveParameter in params
    assert params.find_parameter(DiscountCurveParameter, trade, Measures.PRESENT_VALUE) is csa
    assert params.find_parameter(ModelChoice, trade, Measures.PRESENT_VALUE) is model
    assert params.find_parameter(str, trade, Measures.PRESENT_VALUE) is None


def test_parameters_filter_drops_declined():
    restricted = DiscountCurveParameter.flat("USD-OIS", 0.04, REF, measures=[Measures.PRESENT_VALUE])
    model = ModelChoice("BS")
    params = CalculationParameters.of(restricted, model)

    pv = params.filter(Position(security_id="OG-Ticker~X"), Measures.PRESENT_VALUE)
    par = params.filter(Position(security_id="OG-Ticker~X"), Measures.PAR_RATE)

    assert pv == params
    assert par == CalculationParameters.of(model)


def test_parameters_reject_duplicates(ois, csa):
    with pytest.raises(ValueError, match="Duplicate"):
        CalculationParameters.of(ois, csa)


def test_parameters_reject_wrong_key(ois):
    with pytest.raises(ValueError):
        CalculationParameters({ModelChoice: ois})


def test_parameters_combined_with(ois, csa):
    model = ModelChoice("BS")
    merged = CalculationParameters.of(ois).combined_with(CalculationParameters.of(csa, model))

    assert merged.parameters[DiscountCurveParameter] is ois
    assert merged.parameters[ModelChoice] is model
    assert CalculationParameters.empty().combined_with(merged) == merged


def test_discount_curve_parameter_pickles(csa):
    restored = pickle.loads(pickle.dumps(csa))

    assert restored == csa
    assert restored.curve.discount("2027-01-02") == pytest.approx(math.exp(-0.05), rel=1e-9)


def test_counterparty_selector_of_curves_copies_and_pickles(ois, csa):
    sel = TradeCounterpartyCalculationParameter.of({"OG-Counterparty~BANK-A": csa}, ois)

    assert copy.deepcopy(sel) == sel
    assert pickle.loads(pickle.dumps(sel)) == sel


def test_parameters_copy_and_pickle(ois):
    params = CalculationParameters.of(ois)

    assert copy.copy(params) == params
    assert copy.deepcopy(params) == params
    restored = pickle.loads(pickle.dumps(params))
    assert restored == params
    assert hash(restored) == hash(params)
    with pytest.raises(TypeError):
        restored.parameters[DiscountCurveParameter] = ois
