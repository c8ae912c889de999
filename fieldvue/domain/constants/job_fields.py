"""Constants for Job model field names"""


class JobFields:
    """Field name constants for Job model"""
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    STATUS = "status"
    CUSTOMER_NAME = "customer_name"
    CUSTOMER_ADDRESS = "customer_address"
    CUSTOMER_PHONE = "customer_phone"
    APPOINTMENT_DATE = "appointment_date"
    ESTIMATED_COST = "estimated_cost"
    CUSTOMER_ID = "customer_id"
    CONTRACTOR_ID = "contractor_id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
