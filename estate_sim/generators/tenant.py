"""Tenant and lease application generator."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Iterator

from estate_sim.generators.base import BaseGenerator
from estate_sim.models.enums import Occupation, Rating
from estate_sim.models.tenant import LeaseApplication, RentalHistory, Tenant

logger = logging.getLogger(__name__)


class TenantGenerator(BaseGenerator):
    """Generate prospective tenants and their lease applications."""

    OCCUPATIONS = list(Occupation)

    # Income as a multiple of twice the rent
    INCOME_MULTIPLIERS = {
        Occupation.DOCTOR: 8,
        Occupation.LAWYER: 7,
        Occupation.BUSINESS_OWNER: 6,
        Occupation.ENGINEER: 5,
        Occupation.MANAGER: 4.5,
        Occupation.TEACHER: 3,
        Occupation.OFFICE_WORKER: 3,
        Occupation.RETAIL_WORKER: 2,
        Occupation.SERVICE_WORKER: 2,
        Occupation.FREELANCER: 3,
        Occupation.STUDENT: 1.5,
        Occupation.RETIRED: 2,
        Occupation.UNEMPLOYED: 1,
    }

    CREDIT_SCORE_OFFSETS = {
        Occupation.DOCTOR: 100,
        Occupation.LAWYER: 100,
        Occupation.BUSINESS_OWNER: 70,
        Occupation.ENGINEER: 70,
        Occupation.STUDENT: -50,
        Occupation.UNEMPLOYED: -100,
    }

    BASE_CREDIT_SCORE = 650
    MIN_CREDIT_SCORE = 350
    MAX_CREDIT_SCORE = 850

    LEASE_LENGTHS = [6, 12, 18, 24]
    DESIRED_LEASE_LENGTHS = [6, 12, 12, 18, 24]
    DEFAULT_APPLICATION_FEE = 50

    def generate(self, rent_price: int, today: date | None = None) -> Tenant:
        """Generate a tenant able to afford ``rent_price``.

        Parameters
        ----------
        rent_price : int
            Monthly rent of the property being applied for.
        today : date | None
            Simulated date, used only for logging context.

        Returns
        -------
        Tenant
            Generated tenant.
        """
        occupation = self.rng.choice(self.OCCUPATIONS)

        income_multiplier = self.INCOME_MULTIPLIERS.get(occupation, 3)
        monthly_income = round(rent_price * 2 * income_multiplier * self.rng.uniform(0.8, 1.2))

        base_score = self.BASE_CREDIT_SCORE + self.CREDIT_SCORE_OFFSETS.get(occupation, 0)
        credit_score = min(
            self.MAX_CREDIT_SCORE,
            max(self.MIN_CREDIT_SCORE, base_score + self.rng.randint(-50, 50)),
        )

        lease_length = self.rng.choice(self.LEASE_LENGTHS)

        tenant = Tenant(
            tenant_id=self.fake.uuid4(),
            name=self.fake.name(),
            occupation=occupation,
            monthly_income=monthly_income,
            credit_score=credit_score,
            family_size=self.rng.randint(1, 5),
            pets=self.rng.random() > 0.7,
            smoker=self.rng.random() > 0.8,
            rental_history=self._generate_rental_history(),
            references=self._generate_references(credit_score),
            lease_length=lease_length,
            planned_stay_duration=self._generate_planned_stay(lease_length),
            rent_amount=rent_price,
            payment_probability=0.0,
            property_care_probability=0.0,
        )
        self.apply_credit_score(tenant, credit_score)
        return tenant

    def generate_batch(self, rent_price: int, count: int) -> Iterator[Tenant]:
        """Generate multiple tenants for the same rent."""
        for _ in range(count):
            yield self.generate(rent_price)

    def generate_lease_applications(
        self,
        rent_price: int,
        count: int,
        quality_modifier: float = 0.0,
        application_date: date | None = None,
        application_fee: float = DEFAULT_APPLICATION_FEE,
    ) -> list[LeaseApplication]:
        """Generate a batch of lease applications.

        Each applicant's credit score is redrawn from a distribution shifted
        by ``quality_modifier`` so events can improve or degrade the pool.

        Parameters
        ----------
        rent_price : int
            Monthly rent of the property. Non-positive rents yield no
            applications.
        count : int
            Number of applications.
        quality_modifier : float
            Added to each applicant's base quality draw.
        application_date : date | None
            Date stamped on the applications (today when omitted).
        application_fee : float
            Fee attached to each application.

        Returns
        -------
        list[LeaseApplication]
            Generated applications.
        """
        if rent_price is None or rent_price <= 0:
            logger.error("Invalid rent price for lease applications: %r", rent_price)
            return []

        logger.debug("Generating %d lease applications for rent $%d", count, rent_price)
        application_date = application_date or date.today()

        applications = []
        for _ in range(count):
            tenant = self.generate(rent_price)
            self.apply_credit_score(tenant, self._quality_credit_score(quality_modifier))
            applications.append(
                LeaseApplication(
                    tenant=tenant,
                    desired_lease_length=self.rng.choice(self.DESIRED_LEASE_LENGTHS),
                    application_date=application_date,
                    application_fee=application_fee,
                )
            )

        return applications

    @staticmethod
    def apply_credit_score(tenant: Tenant, credit_score: int) -> None:
        """Set the credit score and the behavior probabilities derived from it."""
        tenant.credit_score = credit_score
        if tenant.rent_amount > 0:
            income_term = tenant.monthly_income / (tenant.rent_amount * 10)
        else:
            # Nothing to pay: income alone saturates the cap.
            income_term = 1.0
        tenant.payment_probability = min(0.98, 0.5 + credit_score / 1000 + income_term)
        tenant.property_care_probability = min(0.95, 0.6 + (credit_score / 1000) * 0.5)

    def _quality_credit_score(self, quality_modifier: float) -> int:
        """Credit score from one of four bands picked by adjusted quality."""
        quality = max(0.0, min(1.0, self.rng.random() + quality_modifier))
        if quality > 0.8:
            return round(700 + self.rng.random() * 150)
        elif quality > 0.5:
            return round(650 + self.rng.random() * 100)
        elif quality > 0.2:
            return round(550 + self.rng.random() * 150)
        else:
            return round(500 + self.rng.random() * 100)

    def _generate_rental_history(self) -> RentalHistory:
        evictions = self.rng.randint(1, 2) if self.rng.random() > 0.9 else 0
        if self.rng.random() > 0.7:
            review = Rating.EXCELLENT if self.rng.random() > 0.5 else Rating.GOOD
        else:
            review = Rating.AVERAGE if self.rng.random() > 0.5 else Rating.POOR

        return RentalHistory(
            evictions=evictions,
            previous_landlord_reviews=review,
            years_of_rental_history=self.rng.randint(1, 10),
            times_moved_last_five_years=self.rng.randint(1, 4),
        )

    def _generate_references(self, credit_score: int) -> Rating:
        coin = self.rng.random()
        if credit_score > 750:
            return Rating.EXCELLENT if coin > 0.2 else Rating.GOOD
        elif credit_score > 650:
            return Rating.GOOD if coin > 0.5 else Rating.AVERAGE
        elif credit_score > 550:
            return Rating.AVERAGE if coin > 0.5 else Rating.POOR
        else:
            return Rating.POOR if coin > 0.5 else Rating.NONE

    def _generate_planned_stay(self, lease_length: int) -> int:
        """Months the tenant means to stay: leave early, match lease, or overstay."""
        branch = self.rng.random()
        if branch < 0.2:
            return math.ceil(lease_length * (0.5 + self.rng.random() * 0.3))
        elif branch < 0.7:
            return lease_length
        else:
            return lease_length + self.rng.randint(0, 11)
