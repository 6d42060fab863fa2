"""Record shapes returned by the RateMyProfessors GraphQL schema."""

from dataclasses import dataclass, field

from rmp_lite.exceptions import SchemaMismatchError
from rmp_lite.utils import dig

# Wire key -> attribute name for the school summary sub-ratings.
SUMMARY_FIELDS = {
    "campusConditions": "campus_conditions",
    "campusLocation": "campus_location",
    "careerOpportunities": "career_opportunities",
    "clubAndEventActivities": "club_and_event_activities",
    "foodQuality": "food_quality",
    "internetSpeed": "internet_speed",
    "libraryCondition": "library_condition",
    "schoolReputation": "school_reputation",
    "schoolSafety": "school_safety",
    "schoolSatisfaction": "school_satisfaction",
    "socialActivities": "social_activities",
}


@dataclass
class SchoolSummary:
    campus_conditions: float | None = None
    campus_location: float | None = None
    career_opportunities: float | None = None
    club_and_event_activities: float | None = None
    food_quality: float | None = None
    internet_speed: float | None = None
    library_condition: float | None = None
    school_reputation: float | None = None
    school_safety: float | None = None
    school_satisfaction: float | None = None
    social_activities: float | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "SchoolSummary":
        """Build a summary, refusing any key set other than the declared one."""
        missing = sorted(set(SUMMARY_FIELDS) - set(data))
        unexpected = sorted(set(data) - set(SUMMARY_FIELDS))
        if missing or unexpected:
            raise SchemaMismatchError("School summary", missing, unexpected)
        return cls(**{attr: data[key] for key, attr in SUMMARY_FIELDS.items()})


@dataclass
class Department:
    id: str
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Department":
        return cls(id=dig(data, "id"), name=data.get("name"))


@dataclass
class School:
    id: str
    legacy_id: int | None = None
    name: str | None = None
    city: str | None = None
    state: str | None = None
    num_ratings: int | None = None
    avg_rating_rounded: float | None = None
    departments: list[Department] = field(default_factory=list)
    summary: SchoolSummary | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "School":
        summary = data.get("summary")
        return cls(
            id=dig(data, "id"),
            legacy_id=data.get("legacyId"),
            name=data.get("name"),
            city=data.get("city"),
            state=data.get("state"),
            num_ratings=data.get("numRatings"),
            avg_rating_rounded=data.get("avgRatingRounded"),
            departments=[Department.from_dict(d) for d in data.get("departments") or []],
            summary=SchoolSummary.from_dict(summary) if summary is not None else None,
        )


@dataclass
class SchoolEdge:
    cursor: str | None
    node: School

    @classmethod
    def from_dict(cls, data: dict) -> "SchoolEdge":
        node = dig(data, "node")
        return cls(cursor=data.get("cursor"), node=School.from_dict(node))


@dataclass
class TeacherSchool:
    id: str | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "TeacherSchool":
        return cls(id=data.get("id"), name=data.get("name"))


@dataclass
class Teacher:
    id: str | None = None
    school: TeacherSchool | None = None
    typename: str | None = None
    avg_difficulty: float | None = None
    avg_rating: float | None = None
    department: str | None = None
    first_name: str | None = None
    is_saved: bool | None = None
    last_name: str | None = None
    legacy_id: int | None = None
    num_ratings: int | None = None
    would_take_again_percent: float | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Teacher":
        school = data.get("school")
        return cls(
            id=data.get("id"),
            school=TeacherSchool.from_dict(school) if isinstance(school, dict) else None,
            typename=data.get("__typename"),
            avg_difficulty=data.get("avgDifficulty"),
            avg_rating=data.get("avgRating"),
            department=data.get("department"),
            first_name=data.get("firstName"),
            is_saved=data.get("isSaved"),
            last_name=data.get("lastName"),
            legacy_id=data.get("legacyId"),
            num_ratings=data.get("numRatings"),
            would_take_again_percent=data.get("wouldTakeAgainPercent"),
        )

    @property
    def school_id(self) -> str | None:
        return self.school.id if self.school else None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass
class TeacherEdge:
    """A teacher edge; ``raw`` is the edge exactly as the endpoint sent it."""

    cursor: str | None
    node: Teacher
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "TeacherEdge":
        node = dig(data, "node")
        return cls(cursor=data.get("cursor"), node=Teacher.from_dict(node), raw=data)


@dataclass
class PageInfo:
    has_next_page: bool
    end_cursor: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "PageInfo":
        return cls(has_next_page=bool(dig(data, "hasNextPage")), end_cursor=data.get("endCursor"))


@dataclass
class TeacherPage:
    edges: list[TeacherEdge]
    page_info: PageInfo
    result_count: int | None = None
    did_fallback: bool | None = None
    filters: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "TeacherPage":
        return cls(
            edges=[TeacherEdge.from_dict(e) for e in dig(data, "edges") or []],
            page_info=PageInfo.from_dict(dig(data, "pageInfo")),
            result_count=data.get("resultCount"),
            did_fallback=data.get("didFallback"),
            filters=data.get("filters") or [],
        )
