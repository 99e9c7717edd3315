"""
Paillier key generation, encryption, decryption and key serialization.
"""

# Explicit re-export of all functionalities, such that they can be imported properly. Following
# https://www.python.org/dev/peps/pep-0484/#stub-files and
# https://mypy.readthedocs.io/en/stable/command_line.html#cmdoption-mypy-no-implicit-reexport
from tno.mpc.encryption_schemes.templates import (
    EncryptionSchemeWarning as EncryptionSchemeWarning,
)

from tno.mpc.encryption_schemes.paillier_keys.exceptions import (
    PaillierDecodingError as PaillierDecodingError,
)
from tno.mpc.encryption_schemes.paillier_keys.exceptions import (
    PaillierKeyConstructionError as PaillierKeyConstructionError,
)
from tno.mpc.encryption_schemes.paillier_keys.exceptions import (
    PaillierPreconditionError as PaillierPreconditionError,
)
from tno.mpc.encryption_schemes.paillier_keys.key_generation import (
    generate_prime as generate_prime,
)
from tno.mpc.encryption_schemes.paillier_keys.key_generation import (
    generate_random_keys as generate_random_keys,
)
from tno.mpc.encryption_schemes.paillier_keys.paillier import (
    PaillierPrivateKey as PaillierPrivateKey,
)
from tno.mpc.encryption_schemes.paillier_keys.paillier import (
    PaillierPublicKey as PaillierPublicKey,
)
from tno.mpc.encryption_schemes.paillier_keys.serialization import (
    deserialize as deserialize,
)
from tno.mpc.encryption_schemes.paillier_keys.serialization import (
    serialize as serialize,
)

__version__ = "1.0.0"
