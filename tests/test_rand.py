import string
from concurrent.futures import ThreadPoolExecutor

from icecore.rand import CandidateIDGenerator, generate_pwd, generate_ufrag

_COUNT = 100
_ROUNDS = 10
_ID_CHARS = set(string.ascii_letters + string.digits + "+/")


def _generate_concurrently(gen):
    with ThreadPoolExecutor(max_workers=16) as pool:
        futures = [pool.submit(gen) for _ in range(_COUNT)]
        return [f.result() for f in futures]


def test_candidate_id_no_collisions_when_generated_concurrently():
    generator = CandidateIDGenerator()
    first = generator.generate()
    assert first.startswith("candidate:")
    for _ in range(_ROUNDS):
        values = _generate_concurrently(lambda: generator.generate())
        assert len(values) == _COUNT
        assert len(set(values)) == _COUNT


def test_pwd_no_collisions_when_generated_concurrently():
    assert len(generate_pwd()) == 32
    for _ in range(_ROUNDS):
        values = _generate_concurrently(lambda: generate_pwd())
        assert len(values) == _COUNT
        assert len(set(values)) == _COUNT


def test_ufrag_no_collisions_when_generated_concurrently():
    assert len(generate_ufrag()) == 16
    for _ in range(_ROUNDS):
        values = _generate_concurrently(lambda: generate_ufrag())
        assert len(values) == _COUNT
        assert len(set(values)) == _COUNT


def test_candidate_id_format():
    value = CandidateIDGenerator().generate()
    prefix = "candidate:"
    assert value[: len(prefix)] == prefix
    foundation = value[len(prefix):]
    assert len(foundation) == 32
    assert set(foundation) <= _ID_CHARS


def test_pwd_format():
    value = generate_pwd()
    assert len(value) == 32
    assert set(value) <= set(string.ascii_letters)


def test_ufrag_format():
    value = generate_ufrag()
    assert len(value) == 16
    assert set(value) <= set(string.ascii_letters)


def test_ufrag_and_pwd_meet_minimum_bits():
    # 24 bits for the ufrag and 128 bits for the password at one byte per char.
    assert len(generate_ufrag()) * 8 >= 24
    assert len(generate_pwd()) * 8 >= 128