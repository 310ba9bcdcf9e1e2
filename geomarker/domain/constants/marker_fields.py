"""Constants for Marker model field names"""


class MarkerFields:
    """Field name constants for Marker documents"""
    ID = "id"
    POSITION = "position"
    LAT = "lat"
    LNG = "lng"
    CONTENT = "content"
    CREATED_AT = "createdAt"

    # Dotted paths used by indexes and queries
    POSITION_LAT = "position.lat"
    POSITION_LNG = "position.lng"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class MarkerLimits:
    """Bounds enforced on marker payloads"""
    LAT_MIN = -90.0
    LAT_MAX = 90.0
    LNG_MIN = -180.0
    LNG_MAX = 180.0
    CONTENT_MIN_LENGTH = 1
    CONTENT_MAX_LENGTH = 200
