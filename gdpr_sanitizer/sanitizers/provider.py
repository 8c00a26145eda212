"""Synthetic replacement values backed by Faker."""

from typing import Optional

from faker import Faker


class SyntheticValueProvider:
    """
    Source of plausible fake values.

    Values are not guaranteed to be unique; callers that need uniqueness
    check candidates themselves. The underlying ``faker`` instance is handed
    to hooks so they can generate values for custom fields.
    """

    def __init__(self, locale: Optional[str] = None, seed: Optional[int] = None):
        """
        Initialize provider.

        Args:
            locale: Faker locale (default en_US)
            seed: Seed for reproducible values
        """
        self.faker = Faker(locale or "en_US")
        if seed is not None:
            self.faker.seed_instance(seed)

    def name(self) -> str:
        return self.faker.name()

    def first_name(self) -> str:
        return self.faker.first_name()

    def safe_email(self) -> str:
        return self.faker.safe_email()

    def url(self) -> str:
        return self.faker.url()

    def ipv4(self) -> str:
        return self.faker.ipv4()

    def user_agent(self) -> str:
        return self.faker.user_agent()

    def password(self) -> str:
        return self.faker.password()

    def user_name(self) -> str:
        return self.faker.user_name()

    def numerify(self, text: str) -> str:
        """Replace every '#' in text with a random digit."""
        return self.faker.numerify(text)
