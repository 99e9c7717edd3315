"""
Generation of Paillier key material, in a simple variant ($g = n + 1$) and a full variant
(randomly chosen generator $g$).
"""

from __future__ import annotations

import logging
import warnings
from math import gcd, lcm
from secrets import randbelow, randbits

import gmpy2

from tno.mpc.encryption_schemes.templates import EncryptionSchemeWarning
from tno.mpc.encryption_schemes.utils import mod_inv, pow_mod

from tno.mpc.encryption_schemes.paillier_keys.exceptions import (
    PaillierKeyConstructionError,
)
from tno.mpc.encryption_schemes.paillier_keys.paillier import (
    PaillierPrivateKey,
    PaillierPublicKey,
    func_l,
)

logger = logging.getLogger(__name__)

MILLER_RABIN_ROUNDS = 64
"""
Number of Miller-Rabin rounds used to test prime candidates. A composite passes a single round
with probability at most 1/4, so the false-positive probability is bounded by $4^{-64} = 2^{-128}$.
"""

DEFAULT_MINIMUM_KEY_LENGTH = 512
"""
Smallest bit length of the modulus $n$ that is accepted unless the caller explicitly lowers it.
"""

SMALLEST_KEY_LENGTH = 8
"""
Smallest accepted bit length of the modulus $n$. Below 6 bits no two distinct primes of half the
width exist.
"""

WARN_UNVALIDATED_GENERATOR = (
    "The generator of the full Paillier variant is not validated against reference test "
    "vectors. Use the simple variant for new deployments."
)


def generate_random_keys(
    key_length: int,
    simple_variant: bool = False,
    minimum_key_length: int = DEFAULT_MINIMUM_KEY_LENGTH,
) -> tuple[PaillierPublicKey, PaillierPrivateKey]:
    r"""
    Method to generate key material (PaillierPublicKey and PaillierPrivateKey).

    The primes $p$ and $q$ both have exactly key_length / 2 bits. Pairs are redrawn until their
    product $n$ has exactly key_length bits.

    :param key_length: Bit length of the public key $n$.
    :param simple_variant: If True, use $g = n + 1$ and $\lambda = (p-1)(q-1)$. Otherwise, use a
        random generator $g$ and $\lambda = \text{lcm}(p-1, q-1)$.
    :param minimum_key_length: Smallest key length that is accepted.
    :raise ValueError: When the key length is odd or too small.
    :raise PaillierKeyConstructionError: When the drawn parameters do not yield a valid key.
    :return: Tuple with first the Public Key and then the Secret Key.
    """
    if key_length % 2 != 0:
        raise ValueError(f"The key length should be even, received {key_length}.")
    if key_length < max(minimum_key_length, SMALLEST_KEY_LENGTH):
        raise ValueError(
            f"The key length should be at least {max(minimum_key_length, SMALLEST_KEY_LENGTH)}"
            f" bits, received {key_length}."
        )

    prime_width = key_length // 2
    attempts = 0
    n = 1
    while n.bit_length() != key_length:
        attempts += 1
        p = generate_prime(prime_width)
        q = generate_prime(prime_width)
        while p == q:
            q = generate_prime(prime_width)
        n = p * q
    logger.debug(
        "Found a %d-bit modulus after %d attempt(s), simple_variant=%s.",
        key_length,
        attempts,
        simple_variant,
    )

    phi = (p - 1) * (q - 1)
    n_squared = n * n

    try:
        if simple_variant:
            g = n + 1
            lambda_ = phi
            mu = mod_inv(lambda_, n)
        else:
            warnings.warn(
                WARN_UNVALIDATED_GENERATOR, EncryptionSchemeWarning, stacklevel=2
            )
            g = generator(n, n_squared)
            lambda_ = lcm(p - 1, q - 1)
            mu = mod_inv(func_l(pow_mod(g, lambda_, n_squared), n), n)
    except (ZeroDivisionError, ValueError) as exc:
        raise PaillierKeyConstructionError(
            "The decryption multiplier mu does not exist for the drawn parameters."
        ) from exc

    public_key = PaillierPublicKey(n=n, n_squared=n_squared, g=g)
    secret_key = PaillierPrivateKey(
        lambda_=lambda_, mu=mu, p=p, q=q, public_key=public_key
    )
    return public_key, secret_key


def generate_prime(width: int) -> int:
    """
    Generate a random prime of exactly the given bit width.

    Candidates have their most significant bit set, fixing the width, and their least
    significant bit set, making them odd. Candidates are accepted when they pass
    MILLER_RABIN_ROUNDS rounds of Miller-Rabin.

    :param width: Bit width of the prime.
    :raise ValueError: When the width is smaller than 2.
    :return: Probable prime of exactly width bits.
    """
    if width < 2:
        raise ValueError(f"The prime width should be at least 2, received {width}.")
    while True:
        candidate = randbits(width) | (1 << (width - 1)) | 1
        if gmpy2.is_prime(candidate, MILLER_RABIN_ROUNDS):
            return candidate


def generator(n: int, n_squared: int) -> int:
    r"""
    Draw a random generator $g = (\alpha n - 1) \cdot \beta^n \mod n^2$ for uniformly random
    $\alpha, \beta \in [0, n)$.

    This construction differs from the textbook $g = (1 + n)^a \cdot b^n \mod n^2$. Decryption is
    correct whenever $\gcd(\alpha\beta, n) = 1$, so other draws are rejected.

    :param n: Modulus $n$ of the plaintext space.
    :param n_squared: Modulus $n^2$ of the ciphertext space.
    :return: Generator $g$.
    """
    while True:
        alpha = randbelow(n)
        beta = randbelow(n)
        if gcd(alpha * beta, n) == 1:
            break
    return (alpha * n - 1) * pow_mod(beta, n, n_squared) % n_squared
