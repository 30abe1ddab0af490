# nora

Building blocks for polynomial neural networks, plus a small
multi-producer, multi-consumer broadcast channel.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Broadcast channel (`nora.broadcast`)

A `Channel` has a fixed capacity. Every `Receiver` is given each message
sent after it was created.

```python
from nora.broadcast import Channel

with Channel(2) as tx:
    rx1 = tx.spawn_rx()
    rx2 = rx1.clone()
    tx.send(1)
    tx.send(2)
    assert rx1.recv() == 1
    assert rx2.try_recv() == 1
```

- `Channel(capacity)` raises `ValueError` when the capacity is not positive.
- `Channel.send` raises `FullError` when the ring has no free seat and
  `DisconnectedError` when there are no receivers. `Channel.blocking_send`
  waits for a free seat instead of raising `FullError`.
- `Receiver.try_recv` raises `EmptyError` when there is nothing new.
  `Receiver.recv` waits for a message. Both raise `DisconnectedError` once
  every sending handle is closed and the receiver has read everything.
- Iterating over a `Receiver` yields messages until the channel disconnects.
- `Channel.clone` and `Receiver.clone_channel` make further sending handles,
  and `Receiver.clone` makes further receivers. `close()`, or leaving a
  `with` block, releases a handle. A receiver that is closed marks its
  unread messages as read, so it no longer holds writers back.
- `Channel.debug_state()` returns a text dump of the tail, the number of
  readers and every seat.

A receiver that is never read from stops writers once the ring is full.
The error classes live in `nora.broadcast_errors`. All of them derive from
`ChannelError`. The `FullError` and `DisconnectedError` raised by a send
carry the rejected message as `.value`.

## Polynomials (`nora.polynomial`)

`Variable`, `PolyComponent` and `Polynomial` describe sums of weighted
monomials. `Polynomial.expand(other, weight, exponent)` adds
`weight * other ** exponent`, fully multiplied out. Negative exponents
invert the terms. Terms with the same operands are merged.

```python
from nora.polynomial import Polynomial

inner = Polynomial().with_operation(1.0, "x", 2).with_operation(1.0, "x", 1)
outer = Polynomial()
outer.expand(inner, 1.0, 2).sort_by_exponent("x")
print(outer)  # [x]^2 + 2[x]^3 + [x]^4
```

`map_operands` renames the variables through a mapping and raises
`KeyError` for a variable that has no mapping.

## Evaluating polynomials (`nora.basis`, `nora.poly_network`)

`BasisTemplate` collects every distinct monomial of a list of polynomials.
`make_tensor` evaluates those monomials into a float32 column. `Coefficients`
lays the weights of each polynomial out against that basis.
`PolynomialNetwork.from_polynomials(polynomials, input_ids)` combines these
into a network. Its `predict(inputs)` computes every polynomial with a single
numpy matrix product. The value at position *i* of `inputs` belongs to the
*i*-th id.

```python
from nora.polynomial import Polynomial
from nora.poly_network import PolynomialNetwork

poly = Polynomial().with_operation(2.0, "x", 1)
net = PolynomialNetwork.from_polynomials([poly], ["x"])
assert net.predict([3.0]) == [6.0]
```

## Neuron descriptions

- `nora.poly_input.PolyInput` is a weighted, exponentiated connection.
  `PolyInput.random` draws a weight in [-1, 1] and an exponent in {0, 1, 2}.
- `nora.neuron_type` provides `NeuronType`, `PropsType` and `PolyProps`.
- `nora.poly_neuron` provides `PolyNeuron` and the abstract base `Neuron`.
  A `PolyNeuron` without properties is an input neuron.
- `nora.activation` provides `random_bias` and `random_exponent`. The first
  draws a value in [0, 1) and the second draws 0 or 1, each from a
  `random.Random`.

## What this package does not do

There is no command-line program.

There is no network topology that can be built, mutated or evolved. The
polynomials given to `PolynomialNetwork` must be built by the caller, for
example with `Polynomial.expand`.

There is no GPU backend. Evaluation uses numpy on the CPU.