"""Weighted reputation (PSI) aggregator."""

import math
from typing import Iterable
from uuid import uuid4

import logfire
from pydantic import BaseModel

from pulse.config import PsiSettings
from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.psi_vote import PsiVote
from pulse.domain.repository import (
    CategoryRepository,
    ProfileRepository,
    PsiVoteRepository,
    UserRepository,
)
from pulse.domain.value import (
    CategoryId,
    ProfileId,
    ProfileStatus,
    PsiRatings,
    PsiVoteId,
    UserId,
)

from .base import Service
from .clock import Clock


class PsiScore(BaseModel):
    """Aggregated PSI of a profile."""

    profile_id: ProfileId
    vote_count: int
    overall_score: int
    parameters: PsiRatings


class TrendingProfile(BaseModel):
    """Profile summary attached to a trending entry."""

    id: ProfileId
    name: str
    category_name: str | None = None


class TrendingEntry(PsiScore):
    """PSI of a profile in the trending list."""

    profile: TrendingProfile | None = None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


class _Accumulator:
    """Running weighted sums of one profile's votes."""

    def __init__(self) -> None:
        self.total_weight = 0.0
        self.trust = 0.0
        self.performance = 0.0
        self.responsiveness = 0.0
        self.leadership = 0.0
        self.count = 0

    def add(self, vote: PsiVote) -> None:
        w = vote.weight
        self.total_weight += w
        self.trust += w * vote.ratings.trust_integrity
        self.performance += w * vote.ratings.performance_delivery
        self.responsiveness += w * vote.ratings.responsiveness
        self.leadership += w * vote.ratings.leadership_ability
        self.count += 1

    def score(self, profile_id: ProfileId) -> PsiScore:
        if self.count == 0:
            return PsiScore(
                profile_id=profile_id,
                vote_count=0,
                overall_score=0,
                parameters=PsiRatings.neutral(),
            )

        denominator = self.total_weight or 1.0
        parameters = PsiRatings(
            trust_integrity=self.trust / denominator,
            performance_delivery=self.performance / denominator,
            responsiveness=self.responsiveness / denominator,
            leadership_ability=self.leadership / denominator,
        )
        # 0..100 around a neutral 50 becomes -100..+100
        return PsiScore(
            profile_id=profile_id,
            vote_count=self.count,
            overall_score=round_half_up((parameters.mean() - 50) * 2),
            parameters=parameters,
        )


def aggregate(profile_id: ProfileId, votes: Iterable[PsiVote]) -> PsiScore:
    """Weighted mean of every factor over a profile's current votes."""
    acc = _Accumulator()
    for vote in votes:
        acc.add(vote)
    return acc.score(profile_id)


class PsiService(Service):
    """Domain service for PSI votes and scores.

    A voter's weight comes from their trust state at the time of their
    latest vote: verified voters count fully, unverified voters count less,
    and unverified voters new to PSI count least.
    """

    def __init__(
        self,
        psi_vote_repository: PsiVoteRepository,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
        psi_settings: PsiSettings,
        clock: Clock,
    ) -> None:
        """Initialize PSI service.

        Args:
            psi_vote_repository: PSI vote repository
            profile_repository: Profile repository
            user_repository: User repository
            category_repository: Category repository (trending labels)
            psi_settings: Weight thresholds
            clock: Time source
        """
        self.psi_vote_repository = psi_vote_repository
        self.profile_repository = profile_repository
        self.user_repository = user_repository
        self.category_repository = category_repository
        self.settings = psi_settings
        self.clock = clock

    async def voter_weight(self, user_id: UserId) -> float:
        """Weight of a voter's ratings, from their current trust state.

        Args:
            user_id: Voter

        Returns:
            Verified weight, unverified weight, or new-unverified weight

        Raises:
            NotFoundError: USER_NOT_FOUND
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise DomainError.from_code(ErrorCode.USER_NOT_FOUND)

        if user.is_verified:
            return self.settings.verified_weight

        rated = await self.psi_vote_repository.count_distinct_profiles_by_user(user_id)
        if rated < self.settings.new_voter_profile_threshold:
            return self.settings.new_unverified_weight
        return self.settings.unverified_weight

    async def submit_vote(
        self, user_id: UserId, profile_id: ProfileId, ratings: PsiRatings
    ) -> PsiScore:
        """Record a voter's ratings of a profile, replacing any earlier ones.

        Args:
            user_id: Voter
            profile_id: Rated profile
            ratings: The four factors, clamped to 0..100 before storage

        Returns:
            The profile's recomputed PSI

        Raises:
            NotFoundError: PROFILE_NOT_FOUND, USER_NOT_FOUND
        """
        with logfire.span(
            "psi_service.submit_vote",
            user_id=str(user_id),
            profile_id=str(profile_id),
        ):
            profile = await self.profile_repository.find_by_id(profile_id)
            if profile is None or profile.status != ProfileStatus.ACTIVE:
                logfire.warn("PSI vote on unknown profile", profile_id=str(profile_id))
                raise DomainError.from_code(ErrorCode.PROFILE_NOT_FOUND)

            weight = await self.voter_weight(user_id)

            stored = await self.psi_vote_repository.upsert(
                PsiVote(
                    id=PsiVoteId(uuid4()),
                    profile_id=profile_id,
                    user_id=user_id,
                    weight=weight,
                    ratings=ratings.clamped(),
                    created_at=self.clock.now(),
                )
            )
            logfire.info(
                "PSI vote stored",
                profile_id=str(profile_id),
                psi_vote_id=str(stored.id),
                weight=weight,
            )
            return await self.get_profile_psi(profile_id)

    async def get_profile_psi(self, profile_id: ProfileId) -> PsiScore:
        """Recompute a profile's PSI from its current votes.

        Zero votes give every factor the neutral 50 and a score of 0.
        """
        with logfire.span("psi_service.get_profile_psi", profile_id=str(profile_id)):
            votes = await self.psi_vote_repository.find_by_profile(profile_id)
            score = aggregate(profile_id, votes)
            logfire.info(
                "PSI computed",
                profile_id=str(profile_id),
                vote_count=score.vote_count,
                overall_score=score.overall_score,
            )
            return score

    async def list_trending(self, limit: int | None = None) -> list[TrendingEntry]:
        """Profiles ranked by PSI, highest first.

        All votes are aggregated per profile in a single pass.

        Args:
            limit: Maximum number of entries (defaults from settings)

        Returns:
            Up to ``limit`` entries, each with its profile summary when available
        """
        limit = limit if limit is not None else self.settings.trending_default_limit
        with logfire.span("psi_service.list_trending", limit=limit):
            accumulators: dict[ProfileId, _Accumulator] = {}
            for vote in await self.psi_vote_repository.find_all():
                accumulators.setdefault(vote.profile_id, _Accumulator()).add(vote)

            if not accumulators:
                return []

            profiles = {
                p.id: p
                for p in await self.profile_repository.find_by_ids(list(accumulators))
            }
            category_names = await self._category_names(
                {p.category_id for p in profiles.values()}
            )

            entries = []
            for profile_id, acc in accumulators.items():
                profile = profiles.get(profile_id)
                entries.append(
                    TrendingEntry(
                        **acc.score(profile_id).model_dump(),
                        profile=(
                            TrendingProfile(
                                id=profile.id,
                                name=profile.name,
                                category_name=category_names.get(profile.category_id),
                            )
                            if profile is not None
                            else None
                        ),
                    )
                )

            entries.sort(key=lambda e: e.overall_score, reverse=True)
            logfire.info("Trending listed", profiles=len(entries), limit=limit)
            return entries[:limit]

    async def _category_names(
        self, category_ids: set[CategoryId]
    ) -> dict[CategoryId, str]:
        names = {}
        for category_id in category_ids:
            category = await self.category_repository.find_by_id(category_id)
            if category is not None:
                names[category_id] = category.name
        return names
