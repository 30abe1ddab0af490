import copy
import random
from dataclasses import dataclass

import pytest

from nora.poly_input import PolyInput


def test_new():
    connection = PolyInput(42, 0.5, 2)
    assert connection.input == 42
    assert connection.weight == 0.5
    assert connection.exponent == 2


def test_new_with_negative_weight():
    connection = PolyInput("test", -0.75, 0)
    assert connection.input == "test"
    assert connection.weight == -0.75
    assert connection.exponent == 0


def test_random_keeps_input():
    rng = random.Random(42)
    connection = PolyInput.random(10, rng)
    assert connection.input == 10
    assert -1.0 <= connection.weight <= 1.0
    assert 0 <= connection.exponent <= 2


def test_new_rand_ranges():
    rng = random.Random(42)
    for _ in range(100):
        connection = PolyInput.random(1, rng)
        assert -1.0 <= connection.weight <= 1.0
        assert 0 <= connection.exponent <= 2


def test_new_rand_distribution():
    rng = random.Random(12345)
    num_samples = 1000
    weight_sum = 0.0
    exp_counts = [0, 0, 0]
    for _ in range(num_samples):
        connection = PolyInput.random(1, rng)
        weight_sum += connection.weight
        exp_counts[connection.exponent] += 1

    assert abs(weight_sum / num_samples) < 0.1
    for count in exp_counts:
        assert abs(count / num_samples - 0.333) < 0.05


def test_adjust_weight():
    connection = PolyInput(1, 0.5, 1)

    connection.adjust_weight(0.3)
    assert connection.weight == pytest.approx(0.8)

    connection.adjust_weight(-0.5)
    assert connection.weight == pytest.approx(0.3)

    connection.adjust_weight(-0.3)
    assert connection.weight == pytest.approx(0.0, abs=1e-7)


def test_adjust_weight_doc_example():
    connection = PolyInput(1, 0.5, 1)
    connection.adjust_weight(0.2)
    assert connection.weight == pytest.approx(0.7)
    connection.adjust_weight(-0.3)
    assert connection.weight == pytest.approx(0.4)


def test_adjust_exp():
    connection = PolyInput(1, 0.5, 1)

    connection.adjust_exp(2)
    assert connection.exponent == 3

    connection.adjust_exp(-1)
    assert connection.exponent == 2

    connection.adjust_exp(-2)
    assert connection.exponent == 0

    connection.adjust_exp(-1)
    assert connection.exponent == -1


def test_clone():
    original = PolyInput(42, 0.7, 2)
    cloned = copy.copy(original)
    assert cloned == original
    cloned.adjust_exp(1)
    assert original.exponent == 2
    assert cloned.exponent == 3


def test_debug_format():
    text = repr(PolyInput(123, 0.5, 1))
    assert "PolyInput" in text
    assert "123" in text
    assert "0.5" in text
    assert "1" in text


def test_deterministic_rand():
    seed = 9876
    rng1 = random.Random(seed)
    rng2 = random.Random(seed)
    for i in range(10):
        first = PolyInput.random(i, rng1)
        second = PolyInput.random(i, rng2)
        assert first.weight == second.weight
        assert first.exponent == second.exponent


def test_polynomial_calculation_example():
    connection = PolyInput(1, 0.5, 2)
    contribution = connection.weight * 3.0**connection.exponent
    assert contribution == pytest.approx(4.5)


def test_with_different_input_types():
    assert PolyInput("neuron-a", 0.5, 1).input == "neuron-a"
    assert PolyInput(42, 0.5, 1).input == 42

    @dataclass(frozen=True)
    class NeuronId:
        value: int

    assert PolyInput(NeuronId(123), 0.5, 1).input == NeuronId(123)