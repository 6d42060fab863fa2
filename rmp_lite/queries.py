"""GraphQL documents and request payloads for the RateMyProfessors endpoint."""

# The summary selection asks for `campusCondition` while the declared
# SchoolSummary shape is `campusConditions`; SchoolSummary.from_dict reports
# the difference instead of either side being renamed.
SCHOOL_SEARCH_QUERY = """query NewSearchSchoolsQuery(
  $query: SchoolSearchQuery!
) {
  newSearch {
    schools(query: $query) {
      edges {
        cursor
        node {
          id
          legacyId
          name
          city
          state
          departments {
            id
            name
          }
          numRatings
          avgRatingRounded
          summary {
            campusCondition
            campusLocation
            careerOpportunities
            clubAndEventActivities
            foodQuality
            internetSpeed
            libraryCondition
            schoolReputation
            schoolSafety
            schoolSatisfaction
            socialActivities
          }
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

TEACHER_SEARCH_QUERY = """query TeacherSearchResultsPageQuery(
  $query: TeacherSearchQuery!
  $schoolID: ID
  $includeSchoolFilter: Boolean!
  $afterCursor: String
  $first: Int
) {
  search: newSearch {
    teachers(query: $query, first: $first, after: $afterCursor) {
      didFallback
      edges {
        cursor
        node {
          __typename
          avgDifficulty
          avgRating
          department
          firstName
          id
          isSaved
          lastName
          legacyId
          numRatings
          school {
            id
            name
          }
          wouldTakeAgainPercent
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
      resultCount
      filters {
        field
        options {
          value
          id
        }
      }
    }
  }
  school: node(id: $schoolID) @include(if: $includeSchoolFilter) {
    __typename
    ... on School {
      name
    }
    id
  }
}
"""


def school_search_payload(school_name: str) -> dict:
    return {
        "query": SCHOOL_SEARCH_QUERY,
        "variables": {"query": {"text": school_name}},
    }


def teacher_search_payload(text: str, school_id: str, after_cursor: str, first: int) -> dict:
    """Build one page request; ``after_cursor`` is forwarded untouched."""
    return {
        "query": TEACHER_SEARCH_QUERY,
        "variables": {
            "query": {
                "text": text,
                "schoolID": school_id,
                "fallback": True,
                "departmentID": None,
            },
            "schoolID": school_id,
            "includeSchoolFilter": True,
            "afterCursor": after_cursor,
            "first": first,
        },
    }
