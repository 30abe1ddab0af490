import pytest

from nora.basis import BasisTemplate
from nora.poly_network import Coefficients, PolynomialNetwork
from nora.polynomial import PolyComponent, Polynomial


def _hidden():
    # 3x + y
    return Polynomial().with_operation(3.0, "x", 1).with_operation(1.0, "y", 1)


def _squared_output():
    output = Polynomial()
    output.expand(_hidden(), 1.0, 2)
    return output


def _linear_output(weight):
    output = Polynomial()
    output.expand(_hidden(), weight, 1)
    return output


def test_burn_network_functionality():
    network = PolynomialNetwork.from_polynomials([_squared_output()], ["x", "y"])
    res = network.predict([3.0, 2.0])
    # (3*3 + 2)^2 = 11^2 = 121
    assert res[0] == 121.0


def test_one_value_per_output():
    network = PolynomialNetwork.from_polynomials(
        [_squared_output(), _linear_output(2.0)], ["x", "y"]
    )
    res = network.predict([3.0, 2.0])
    assert len(res) == 2
    assert res[0] == 121.0


def test_weight_scales_output():
    single = PolynomialNetwork.from_polynomials([_linear_output(1.0)], ["x", "y"])
    double = PolynomialNetwork.from_polynomials([_linear_output(2.0)], ["x", "y"])
    for inputs in ([3.0, 2.0], [-1.5, 4.0], [0.0, 0.0]):
        assert double.predict(inputs)[0] == pytest.approx(2 * single.predict(inputs)[0])


def test_squared_output_is_square_of_linear():
    linear = PolynomialNetwork.from_polynomials([_linear_output(1.0)], ["x", "y"])
    squared = PolynomialNetwork.from_polynomials([_squared_output()], ["x", "y"])
    for inputs in ([1.0, 1.0], [0.5, -2.0], [2.0, 3.0]):
        assert squared.predict(inputs)[0] == pytest.approx(linear.predict(inputs)[0] ** 2)


def test_unknown_id_raises():
    with pytest.raises(KeyError):
        PolynomialNetwork.from_polynomials([_squared_output()], ["x"])


def test_too_few_inputs_raises():
    network = PolynomialNetwork.from_polynomials([_squared_output()], ["x", "y"])
    with pytest.raises(KeyError):
        network.predict([1.0])


def test_source_polynomials_are_not_changed():
    output = _squared_output()
    before = str(output)
    PolynomialNetwork.from_polynomials([output], ["x", "y"])
    assert str(output) == before


def test_coefficients_layout():
    polys = [_squared_output(), _linear_output(1.0)]
    template = BasisTemplate.from_polynomials(polys)
    coefficients = Coefficients(polys, template)
    assert coefficients.shape == (2, template.num_rows)
    for poly_index, polynomial in enumerate(polys):
        for component in polynomial.components:
            column = template.position(lambda row: row == component.operands)
            assert coefficients.matrix[poly_index, column] == component.weight
    assert str(coefficients) == f"Coefficients({(2, template.num_rows)})"


def test_coefficients_unknown_term_raises():
    template = BasisTemplate.from_polynomials([Polynomial.unit("x")])
    with pytest.raises(ValueError):
        Coefficients([Polynomial.unit("y")], template)


def test_render_single_unit():
    polys = [Polynomial.unit("x")]
    coefficients = Coefficients(polys, BasisTemplate.from_polynomials(polys))
    assert coefficients.render() == "[\n[ 1.00,]\n]\n"


def test_render_negative_weight_has_no_padding():
    polys = [Polynomial().with_polycomponent(PolyComponent.simple(-2.5, "x", 1))]
    coefficients = Coefficients(polys, BasisTemplate.from_polynomials(polys))
    assert coefficients.render() == "[\n[-2.50,]\n]\n"