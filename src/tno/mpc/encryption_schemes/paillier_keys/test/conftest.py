"""
Fixtures for Paillier key tests
"""

import pytest

from tno.mpc.encryption_schemes.paillier_keys import (
    EncryptionSchemeWarning,
    PaillierPrivateKey,
    generate_random_keys,
)
from tno.mpc.encryption_schemes.paillier_keys.test import (
    KeyPair,
    TOY_G,
    TOY_LAMBDA,
    TOY_MU,
    TOY_N,
    TOY_N_SQUARED,
    TOY_P,
    TOY_Q,
)

KEY_LENGTH = 64


@pytest.fixture(name="simple_key_pair", scope="module")
def fixture_simple_key_pair() -> KeyPair:
    """
    Constructs a key pair in the simple variant.

    :return: Public and secret key with $g = n + 1$.
    """
    return generate_random_keys(
        KEY_LENGTH, simple_variant=True, minimum_key_length=KEY_LENGTH
    )


@pytest.fixture(name="full_key_pair", scope="module")
def fixture_full_key_pair() -> KeyPair:
    """
    Constructs a key pair in the full variant.

    :return: Public and secret key with a random generator $g$.
    """
    with pytest.warns(EncryptionSchemeWarning):
        return generate_random_keys(
            KEY_LENGTH, simple_variant=False, minimum_key_length=KEY_LENGTH
        )


@pytest.fixture(
    name="key_pair",
    params=[True, False],
    ids=["simple_variant", "full_variant"],
    scope="module",
)
def fixture_key_pair(
    request: pytest.FixtureRequest,
    simple_key_pair: KeyPair,
    full_key_pair: KeyPair,
) -> KeyPair:
    """
    Constructs a key pair of either variant.

    :param request: Pytest request fixture.
    :param simple_key_pair: Key pair in the simple variant.
    :param full_key_pair: Key pair in the full variant.
    :return: Key pair in the simple or the full variant.
    """
    if request.param:
        return simple_key_pair
    return full_key_pair


@pytest.fixture(name="toy_secret_key")
def fixture_toy_secret_key() -> PaillierPrivateKey:
    """
    Constructs the toy secret key with $p = 5$ and $q = 7$.

    :return: Toy secret key.
    """
    return PaillierPrivateKey.from_parameters(
        lambda_=TOY_LAMBDA,
        mu=TOY_MU,
        p=TOY_P,
        q=TOY_Q,
        n=TOY_N,
        n_squared=TOY_N_SQUARED,
        g=TOY_G,
    )
