"""Constants for wire field names used by the remote services and the API"""


class MatchFields:
    """Field name constants for face search requests and responses"""
    IMAGE = "image"
    COLLECTION_ID = "collectionId"
    MAX_MATCHES = "maxMatches"
    THRESHOLD = "threshold"

    MATCHES = "matches"
    MATCH_ID = "matchId"
    SIMILARITY_SCORE = "similarityScore"
    THUMBNAIL = "thumbnail"

    # Error bodies
    ERROR_CODE = "code"
    ERROR_MESSAGE = "message"


class EnrichmentFields:
    """Field name constants for enrichment search requests and responses"""
    MATCH_ID = "matchId"
    RESULTS = "results"
