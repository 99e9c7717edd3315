"""
Testing module of the tno.mpc.encryption_schemes.paillier_keys package.
"""

from tno.mpc.encryption_schemes.paillier_keys import (
    PaillierPrivateKey,
    PaillierPublicKey,
)

KeyPair = tuple[PaillierPublicKey, PaillierPrivateKey]

# Toy key with p = 5 and q = 7 in the simple variant: lambda = 24 and 24 * 19 = 1 mod 35.
TOY_P = 5
TOY_Q = 7
TOY_N = 35
TOY_N_SQUARED = 1225
TOY_G = 36
TOY_LAMBDA = 24
TOY_MU = 19
