from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are taken as UTC so every moment compares"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Star(BaseModel):
    """A single star earned by a member (one of two per day)"""

    member_id: str = Field(..., alias="memberId")
    day_nr: int = Field(..., alias="dayNr")  # 1..25
    star_nr: int = Field(..., alias="starNr")  # 1 | 2

    get_star_moment: Optional[datetime] = Field(None, alias="getStarMoment")
    time_taken: Optional[float] = Field(None, alias="timeTaken")  # minutes

    # Running totals up to and including this star
    nr_of_stars_after_this_one: int = Field(0, alias="nrOfStarsAfterThisOne")
    nr_of_points_after_this_one: int = Field(0, alias="nrOfPointsAfterThisOne")

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True

    @field_validator("get_star_moment")
    @classmethod
    def moment_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class Member(BaseModel):
    id: str
    name: Optional[str] = None
    color: str = "#888888"
    score: int = 0

    stars: list[Star] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True

    @property
    def display_name(self) -> str:
        return self.name or f"(anonymous user #{self.id})"


class Leaderboard(BaseModel):
    """
    Leaderboard payload as produced by the data-access layer.

    ``stars`` and ``max_moment`` are precomputed upstream; when a payload
    leaves them out they are derived from the members.
    """

    members: list[Member] = Field(default_factory=list)
    stars: list[Star] = Field(default_factory=list)
    max_moment: Optional[datetime] = Field(None, alias="maxMoment")

    class Config:
        populate_by_name = True

    @field_validator("max_moment")
    @classmethod
    def max_moment_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)

    def all_stars(self) -> list[Star]:
        if self.stars:
            return self.stars
        return [star for member in self.members for star in member.stars]

    def latest_moment(self) -> Optional[datetime]:
        if self.max_moment is not None:
            return self.max_moment
        moments = [s.get_star_moment for s in self.all_stars() if s.get_star_moment is not None]
        return max(moments) if moments else None

    def find_star(self, member_id: str, day_nr: int, star_nr: int) -> Optional[Star]:
        for star in self.all_stars():
            if star.member_id == member_id and star.day_nr == day_nr and star.star_nr == star_nr:
                return star
        return None
