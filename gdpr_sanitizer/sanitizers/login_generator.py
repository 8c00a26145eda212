"""Generation of logins that are not in use yet."""

from gdpr_sanitizer.errors import LoginExhaustedError
from gdpr_sanitizer.models import UserLookup
from gdpr_sanitizer.sanitizers.provider import SyntheticValueProvider
from gdpr_sanitizer.store.base import RecordStore
from gdpr_sanitizer.utils import get_logger

logger = get_logger(__name__)


class UniqueLoginGenerator:
    """
    Find a fake login no existing user has.

    Each attempt asks the provider for a candidate and looks it up in the
    store. Once more than ``suffix_after`` candidates have collided, every
    further candidate gets a random numeric suffix of ``suffix_digits``
    digits. After ``max_attempts`` lookups the generator gives up.

    The check and the later write are not atomic; two runs against the same
    store at once can hand out the same login.
    """

    def __init__(
        self,
        store: RecordStore,
        provider: SyntheticValueProvider,
        max_attempts: int = 30,
        suffix_after: int = 3,
        suffix_digits: int = 5,
    ):
        """
        Initialize login generator.

        Args:
            store: Store used to check candidates
            provider: Source of candidate logins
            max_attempts: Lookups before giving up
            suffix_after: Collisions tolerated before suffixing candidates
            suffix_digits: Width of the numeric suffix
        """
        self.store = store
        self.provider = provider
        self.max_attempts = max_attempts
        self.suffix_after = suffix_after
        self.suffix_digits = suffix_digits

    def generate(self) -> str:
        """
        Return an unused login.

        Raises:
            LoginExhaustedError: If every candidate collided
        """
        collisions = 0
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.provider.user_name()
            if collisions > self.suffix_after:
                candidate = self.provider.numerify(candidate + "#" * self.suffix_digits)

            if self.store.find_user(UserLookup.LOGIN, candidate) is None:
                if collisions:
                    logger.debug(f"Found unused login after {attempt} attempts")
                return candidate

            collisions += 1

        logger.error(f"No unused login after {self.max_attempts} attempts")
        raise LoginExhaustedError(self.max_attempts)
