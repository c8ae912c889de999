"""Constants for Customer model field names"""


class CustomerFields:
    """Field name constants for Customer model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    ADDRESS = "address"
    FIELD = "field"
    CREATED_BY = "created_by"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
