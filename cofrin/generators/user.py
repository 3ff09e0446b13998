"""User generator."""

from datetime import datetime, timedelta
from typing import Iterator

from cofrin.finance.cpf import strip_cpf
from cofrin.generators.base import BaseGenerator
from cofrin.models import User


class UserGenerator(BaseGenerator):
    """Generate app users with valid CPFs."""

    def generate(self) -> User:
        """Generate a single user.

        Returns
        -------
        User
            Generated user; ``cpf`` holds the 11 digits without mask.
        """
        days_ago = self.fake.random_int(0, 2 * 365)
        return User(
            user_id=self.fake.uuid4(),
            name=self.fake.name(),
            cpf=strip_cpf(self.fake.cpf()),
            email=self.fake.email(),
            created_at=datetime.now() - timedelta(days=days_ago),
        )

    def generate_batch(self, count: int) -> Iterator[User]:
        """Generate multiple users."""
        for _ in range(count):
            yield self.generate()
