import logging
import threading

import pytest

from cpgen import (
    InvalidStateError,
    PasswordGenerator,
    PasswordGeneratorBuilder,
    SecureRandomSource,
    SeededRandomSource,
    generate_password,
)
from cpgen.config import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE


def _all_classes(builder):
    return builder.use_lower_case().use_upper_case().use_digits().use_symbols()


def test_lowercase_and_digits_example(builder):
    generator = builder.use_lower_case(True).use_digits(True).build()
    for _ in range(50):
        password = generator.generate(10)
        assert len(password) == 12
        assert set(password) <= set(LOWERCASE + DIGITS)
        assert any(c in LOWERCASE for c in password)
        assert any(c in DIGITS for c in password)


@pytest.mark.parametrize("length", [5, 8, 33])
def test_length_is_request_plus_enabled_classes(builder, length):
    generator = _all_classes(builder).build()
    assert len(generator.generate(length)) == length + 4


def test_every_enabled_class_is_covered(builder, seeded):
    generator = (
        _all_classes(builder)
        .custom_symbols("#")
        .with_random_source(seeded)
        .build()
    )
    for _ in range(100):
        password = generator.generate(5)
        for alphabet in (LOWERCASE, UPPERCASE, DIGITS, "#"):
            assert any(c in alphabet for c in password)


def test_disabled_classes_never_appear(builder):
    generator = builder.use_upper_case().use_symbols().build()
    password = generator.generate(200)
    assert set(password) <= set(UPPERCASE + SYMBOLS)
    assert not any(c in LOWERCASE + DIGITS for c in password)


def test_custom_alphabets_are_used(builder):
    generator = (
        builder.use_lower_case()
        .use_digits()
        .custom_lower_case("q")
        .custom_digits("7")
        .build()
    )
    password = generator.generate(20)
    assert set(password) == {"q", "7"}


def test_two_phase_construction(builder, scripted):
    source = scripted([1, 0, 0, 2, 1, 1, 2, 1])
    generator = (
        builder.use_lower_case()
        .use_digits()
        .custom_lower_case("abc")
        .custom_digits("12")
        .set_minimum_length(2)
        .with_random_source(source)
        .build()
    )

    assert generator.generate(3) == "1c2c2"
    # class pick then char pick for the bulk, one char pick per class after
    assert source.bounds == [2, 2, 2, 3, 2, 2, 3, 2]


def test_length_equal_to_minimum_rejected(builder):
    generator = builder.use_lower_case().build()
    with pytest.raises(InvalidStateError, match="greater than 4"):
        generator.generate(4)


def test_length_below_minimum_rejected(builder):
    generator = builder.use_lower_case().set_minimum_length(8).build()
    with pytest.raises(InvalidStateError):
        generator.generate(3)
    assert len(generator.generate(9)) == 10


def test_no_class_enabled_fails_fast(builder, scripted):
    source = scripted([])
    generator = builder.with_random_source(source).build()
    with pytest.raises(InvalidStateError, match="No character class"):
        generator.generate(10)
    assert source.bounds == []


def test_invalid_state_is_a_runtime_error(builder):
    with pytest.raises(RuntimeError):
        builder.build().generate(10)


def test_same_seed_same_password(builder):
    _all_classes(builder)
    first = builder.with_random_source(SeededRandomSource(7)).build().generate(16)
    second = builder.with_random_source(SeededRandomSource(7)).build().generate(16)
    assert first == second


def test_default_generator_uses_secure_source():
    generator = PasswordGenerator()
    assert isinstance(generator.random_source, SecureRandomSource)
    assert generator.minimum_length == 4
    assert generator.active_rules == ()


def test_repr_names_enabled_classes(builder):
    generator = builder.use_digits().use_symbols().build()
    assert repr(generator) == (
        "PasswordGenerator(minimum_length=4, classes=[digits, symbols])"
    )
    assert "none" in repr(PasswordGeneratorBuilder().build())


def test_concurrent_generation(builder):
    generator = _all_classes(builder).build()
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            password = generator.generate(12)
            with lock:
                results.append(password)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert all(len(p) == 16 for p in results)


def test_password_is_not_logged(builder, caplog):
    caplog.set_level(logging.DEBUG, logger="cpgen")
    password = builder.use_upper_case().build().generate(30)
    assert "Generating password" in caplog.text
    assert password not in caplog.text


def test_generate_password_helper_defaults():
    password = generate_password(10)
    assert len(password) == 13
    assert set(password) <= set(LOWERCASE + UPPERCASE + DIGITS)


def test_generate_password_helper_options():
    password = generate_password(
        3,
        lowercase=False,
        uppercase=False,
        digits=True,
        symbols=True,
        minimum_length=2,
        random_source=SeededRandomSource(0),
    )
    assert len(password) == 5
    assert set(password) <= set(DIGITS + SYMBOLS)


def test_generate_password_helper_enforces_minimum():
    with pytest.raises(InvalidStateError):
        generate_password(4)


@pytest.mark.parametrize("length", [10.0, "10", None, True])
def test_non_integer_length_rejected(builder, length):
    generator = builder.use_digits().build()
    with pytest.raises(InvalidStateError, match="integer"):
        generator.generate(length)


def test_generate_password_lives_beside_the_builder():
    import cpgen
    import cpgen.builder
    import cpgen.generator

    assert cpgen.generate_password is cpgen.builder.generate_password
    assert not hasattr(cpgen.generator, "generate_password")
