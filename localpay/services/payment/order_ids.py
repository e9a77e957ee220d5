"""Random order identifiers for accepted payments."""

import random
import string

ORDER_ID_ALPHABET = string.ascii_lowercase + string.digits
ORDER_ID_LENGTH = 16


class OrderIdGenerator:
    """Draws order ids from a randomness source owned by the instance.

    The default source reads OS entropy, so concurrent requests never share an
    iteration cursor. Ids are not checked for uniqueness.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.SystemRandom()

    def generate(self) -> str:
        return "".join(self.rng.choice(ORDER_ID_ALPHABET) for _ in range(ORDER_ID_LENGTH))
