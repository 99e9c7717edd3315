"""
Key material of the Asymmetric Encryption Scheme known as Paillier.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from math import gcd
from secrets import randbelow

from tno.mpc.encryption_schemes.templates import PublicKey, SecretKey
from tno.mpc.encryption_schemes.utils import mod_inv, pow_mod

from tno.mpc.encryption_schemes.paillier_keys.exceptions import (
    PaillierKeyConstructionError,
    PaillierPreconditionError,
)


def func_l(input_x: int, n: int) -> int:
    r"""
    Paillier specific $L(\cdot)$ function: $L(x) = (x-1)/n$.

    :param input_x: input $x$
    :param n: input $n$ (public key modulus)
    :return: value of $L(x) = (x-1)/n$.
    """
    return (input_x - 1) // n


@dataclass(frozen=True, eq=True)
class PaillierPublicKey(PublicKey):
    r"""
    PublicKey for the Paillier encryption scheme.

    Constructs a new Paillier public key $(n, n^2, g)$, should have $n=pq$, with $p, q$ prime,
    and $g \in \mathbb{Z}^*_{n^2}$.

    :param n: Modulus $n$ of the plaintext space.
    :param n_squared: Modulus $n^2$ of the ciphertext space.
    :param g: Plaintext base $g$ for encryption.
    :raise PaillierKeyConstructionError: When the parameters do not satisfy the invariants above.
    """

    n: int
    n_squared: int
    g: int

    def __post_init__(self) -> None:
        if self.n <= 2:
            raise PaillierKeyConstructionError(
                f"The modulus n should be larger than 2, received {self.n}."
            )
        if self.n_squared != self.n * self.n:
            raise PaillierKeyConstructionError(
                "The ciphertext modulus n2 is not equal to the square of n."
            )
        if not 0 < self.g < self.n_squared or gcd(self.g, self.n) != 1:
            raise PaillierKeyConstructionError(
                "The generator g is not a unit modulo n2."
            )

    @classmethod
    def from_modulus(cls, n: int, g: int | None = None) -> PaillierPublicKey:
        """
        Construct a public key from its modulus, computing $n^2$.

        :param n: Modulus $n$ of the plaintext space.
        :param g: Plaintext base $g$, defaults to $n + 1$.
        :return: PaillierPublicKey for the given modulus.
        """
        return cls(n=n, n_squared=n * n, g=n + 1 if g is None else g)

    def encrypt(self, message: int) -> int:
        r"""
        Encrypt a plaintext with fresh randomness. Given $m \in \mathbb{Z}_n$, we compute
        $c = g^m \cdot r^n \mod n^2$ for a random unit $r \in (1, n)$.

        :param message: Plaintext $m$ to be encrypted.
        :return: Ciphertext $c$.
        """
        return self.encrypt_for_zkp(message)[1]

    def encrypt_for_zkp(self, message: int) -> tuple[int, int]:
        """
        Encrypt a plaintext with fresh randomness, and return the randomness as well. The
        randomness is needed by the prover in zero-knowledge proofs about the ciphertext.

        :param message: Plaintext $m$ to be encrypted.
        :return: Tuple with first the randomness $r$ and then the ciphertext $c$.
        """
        randomness = self._random_unit()
        return randomness, self.encrypt_with_r(message, randomness)

    def encrypt_with_r(self, message: int, randomness: int) -> int:
        r"""
        Deterministically encrypt a plaintext with the given randomness, i.e. compute
        $c = g^m \cdot r^n \mod n^2$.

        :param message: Plaintext $m \in \mathbb{Z}_n$ to be encrypted.
        :param randomness: Randomness $r \in \mathbb{Z}^*_n$.
        :raise PaillierPreconditionError: When $m$ or $r$ are outside of their domain.
        :return: Ciphertext $c$.
        """
        self._check_plaintext(message)
        if not 0 < randomness < self.n or gcd(randomness, self.n) != 1:
            raise PaillierPreconditionError(
                "The randomness should be a unit modulo n in the range (0, n)."
            )
        return (
            pow_mod(self.g, message, self.n_squared)
            * pow_mod(randomness, self.n, self.n_squared)
            % self.n_squared
        )

    def add(self, ciphertext: int, other: int) -> int:
        r"""
        Secure addition. Compute $c' = c_1 \cdot c_2 \mod n^2$, which encrypts the sum of the
        underlying plaintexts modulo $n$.

        :param ciphertext: First ciphertext $c_1$.
        :param other: Second ciphertext $c_2$.
        :return: Ciphertext $c'$ of the sum.
        """
        self.check_ciphertext(ciphertext)
        self.check_ciphertext(other)
        return ciphertext * other % self.n_squared

    def mul(self, ciphertext: int, scalar: int) -> int:
        r"""
        Multiply the underlying plaintext of ciphertext $c$ with the scalar $s$ by computing
        $c' = c^s \mod n^2$. Negative scalars first negate the ciphertext by inverting it modulo
        $n^2$.

        :param ciphertext: Ciphertext $c$.
        :param scalar: Integer scalar $s$.
        :raise TypeError: When the scalar is not an integer.
        :return: Ciphertext $c'$ of the product.
        """
        # numbers.Integral also covers gmpy2 integers
        if not isinstance(scalar, numbers.Integral):
            raise TypeError(
                f"Type of scalar (second multiplicand) should be an integer and not"
                f" {type(scalar)}."
            )
        self.check_ciphertext(ciphertext)
        if scalar < 0:
            ciphertext = mod_inv(ciphertext, self.n_squared)
            scalar = -scalar
        return pow_mod(ciphertext, scalar, self.n_squared)

    def rerandomize(self, ciphertext: int) -> int:
        r"""
        Rerandomize a ciphertext by multiplying it with $r^n \mod n^2$ for a fresh random unit
        $r$. The underlying plaintext does not change.

        :param ciphertext: Ciphertext $c$ to rerandomize.
        :return: Rerandomized ciphertext.
        """
        self.check_ciphertext(ciphertext)
        randomization_value = pow_mod(self._random_unit(), self.n, self.n_squared)
        return ciphertext * randomization_value % self.n_squared

    def check_ciphertext(self, ciphertext: int) -> None:
        r"""
        Verify that a ciphertext is an element of $\mathbb{Z}^*_{n^2}$.

        :param ciphertext: Ciphertext $c$ to check.
        :raise PaillierPreconditionError: When the ciphertext is out of range or not a unit.
        """
        if not 0 <= ciphertext < self.n_squared or gcd(ciphertext, self.n) != 1:
            raise PaillierPreconditionError(
                "The ciphertext is not a unit modulo n2 and can not stem from this key."
            )

    def _check_plaintext(self, message: int) -> None:
        if not 0 <= message < self.n:
            raise PaillierPreconditionError(
                f"Plaintexts should be in the range [0, n), {message} is outside that range."
            )

    def _random_unit(self) -> int:
        # r is drawn from (1, n) and must be coprime to n
        while True:
            randomness = randbelow(self.n - 2) + 2
            if gcd(randomness, self.n) == 1:
                return randomness


@dataclass(frozen=True, eq=True)
class PaillierPrivateKey(SecretKey):
    r"""
    SecretKey for the Paillier encryption scheme.

    Constructs a new Paillier secret key $(\lambda, \mu)$, together with the prime factors $p, q$
    and the corresponding public key. Should have $n=pq$ and
    $\mu = (L(g^\lambda \mod n^2))^{-1} \mod n$, where $L(\cdot)$ is defined as
    $L(x) = (x-1)/n$. For the simple variant ($g = n + 1$) this reduces to
    $\mu = \lambda^{-1} \mod n$.

    :param lambda_: Decryption exponent $\lambda$ of the ciphertext.
    :param mu: Decryption multiplier $\mu$ for the ciphertext.
    :param p: First prime factor of $n$.
    :param q: Second prime factor of $n$.
    :param public_key: Public key that belongs to this secret key.
    :raise PaillierKeyConstructionError: When the parameters do not form a valid key.
    """

    lambda_: int
    mu: int
    p: int
    q: int
    public_key: PaillierPublicKey

    def __post_init__(self) -> None:
        n = self.public_key.n
        if self.p * self.q != n:
            raise PaillierKeyConstructionError(
                "The prime factors p and q do not multiply to the modulus n."
            )
        if not 0 < self.mu < n:
            raise PaillierKeyConstructionError("mu should be in the range (0, n).")
        g_lambda = pow_mod(self.public_key.g, self.lambda_, self.public_key.n_squared)
        if g_lambda % n != 1 or func_l(g_lambda, n) * self.mu % n != 1:
            raise PaillierKeyConstructionError(
                "mu is not the inverse of L(g^lambda mod n2) modulo n."
            )

    @classmethod
    def from_parameters(
        cls,
        lambda_: int,
        mu: int,
        p: int,
        q: int,
        n: int,
        n_squared: int,
        g: int,
    ) -> PaillierPrivateKey:
        r"""
        Construct a secret key, together with its public key, from flat key parameters.

        :param lambda_: Decryption exponent $\lambda$.
        :param mu: Decryption multiplier $\mu$.
        :param p: First prime factor of $n$.
        :param q: Second prime factor of $n$.
        :param n: Modulus $n$ of the plaintext space.
        :param n_squared: Modulus $n^2$ of the ciphertext space.
        :param g: Plaintext base $g$.
        :return: PaillierPrivateKey with a newly constructed PaillierPublicKey.
        """
        public_key = PaillierPublicKey(n=n, n_squared=n_squared, g=g)
        return cls(lambda_=lambda_, mu=mu, p=p, q=q, public_key=public_key)

    def decrypt(self, ciphertext: int) -> int:
        r"""
        Decrypt a ciphertext. Given a ciphertext $c \in \mathbb{Z}^*_{n^2}$, we compute the
        plaintext message as $m = L(c^\lambda \mod n^2) \cdot \mu \mod n$.

        :param ciphertext: Ciphertext $c$ to be decrypted.
        :raise PaillierPreconditionError: When the ciphertext is not a unit modulo $n^2$.
        :return: Plaintext $m$.
        """
        self.public_key.check_ciphertext(ciphertext)
        n = self.public_key.n
        c_lambda = pow_mod(ciphertext, self.lambda_, self.public_key.n_squared)
        message = func_l(c_lambda, n)
        message *= self.mu
        message %= n
        return message
