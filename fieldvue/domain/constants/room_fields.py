"""Constants for Room and RoomImage model field names"""


class RoomFields:
    """Field name constants for Room model"""
    ID = "id"
    JOB_ID = "job_id"
    NAME = "name"
    ROOM_TYPE = "room_type"
    IMAGE_URLS = "image_urls"
    AGGREGATE = "aggregate"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"


class RoomImageFields:
    """Field name constants for the per-image measurement records"""
    ROOM_ID = "room_id"
    IMAGE_URL = "image_url"
    PROCESSED_AT = "processed_at"
    OBJECTS = "objects"
    COUNTS_BY_TYPE = "counts_by_type"
    AREA_SQFT_BY_TYPE = "area_sqft_by_type"
    SCENE = "scene"
    SUMMARY = "summary"
    ROOM_DIMENSIONS = "room_dimensions"
    ERROR = "error"
    ERROR_AT = "error_at"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
