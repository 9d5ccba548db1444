from hypothesis import given, settings
from hypothesis import strategies as st

from kbiolib.rng import MASK64, Krng, splitmix64

u64 = st.integers(min_value=0, max_value=MASK64)


def test_splitmix64_of_zero():
    assert splitmix64(0) == 0xE220A8397B1DCDAF


def test_splitmix64_is_injective_on_sample():
    outputs = {splitmix64(x) for x in range(2000)}
    assert len(outputs) == 2000


@given(u64)
def test_splitmix64_stays_in_64_bits(x):
    assert 0 <= splitmix64(x) <= MASK64


@given(u64)
def test_seed_builds_state_from_splitmix(seed):
    rng = Krng(seed)
    first = splitmix64(seed)
    assert rng.state == (first, splitmix64(first))


@given(u64)
def test_first_output_is_sum_of_state_words(seed):
    rng = Krng(seed)
    s0, s1 = rng.state
    assert rng.next_u64() == (s0 + s1) & MASK64


def test_same_seed_gives_same_sequence():
    a = Krng(11)
    b = Krng(11)
    assert [a.next_u64() for _ in range(50)] == [b.next_u64() for _ in range(50)]


def test_different_seeds_give_different_sequences():
    a = Krng(1)
    b = Krng(2)
    assert [a.next_u64() for _ in range(5)] != [b.next_u64() for _ in range(5)]


def test_reseed_restarts_sequence():
    rng = Krng(42)
    first = [rng.next_u64() for _ in range(10)]
    rng.seed(42)
    assert [rng.next_u64() for _ in range(10)] == first


def test_outputs_in_range():
    rng = Krng(7)
    values = [rng.next_u64() for _ in range(1000)]
    assert all(0 <= v <= MASK64 for v in values)
    assert len(set(values)) == 1000


def test_random_in_unit_interval_with_52_bits():
    rng = Krng(123)
    for _ in range(1000):
        x = rng.random()
        assert 0.0 <= x < 1.0
        assert (x * 2**52).is_integer()


def test_random_uses_top_bits_of_next_u64():
    a = Krng(99)
    b = Krng(99)
    for _ in range(20):
        assert a.random() * 2**52 == b.next_u64() >> 12


def test_random_mean_is_about_half():
    rng = Krng(5)
    values = [rng.random() for _ in range(20000)]
    assert abs(sum(values) / len(values) - 0.5) < 0.02


def test_jump_is_deterministic_and_changes_stream():
    a = Krng(3)
    b = Krng(3)
    plain = Krng(3)
    a.jump()
    b.jump()
    assert a.state == b.state
    assert a.state != plain.state
    assert [a.next_u64() for _ in range(5)] != [plain.next_u64() for _ in range(5)]


def test_jump_of_zero_state_stays_zero():
    rng = Krng(0)
    rng.state = (0, 0)
    rng.jump()
    assert rng.state == (0, 0)
    assert rng.next_u64() == 0


@settings(max_examples=20)
@given(u64, u64, u64, u64)
def test_jump_is_linear_over_xor(a0, a1, b0, b1):
    ra, rb, rc = Krng(), Krng(), Krng()
    ra.state = (a0, a1)
    rb.state = (b0, b1)
    rc.state = (a0 ^ b0, a1 ^ b1)
    ra.jump()
    rb.jump()
    rc.jump()
    assert rc.state == (ra.state[0] ^ rb.state[0], ra.state[1] ^ rb.state[1])