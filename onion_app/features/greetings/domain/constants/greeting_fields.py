"""Constants for Greeting model field names"""


class GreetingFields:
    """Field name constants for Greeting model"""
    ID = "id"
    NAME = "name"
    MESSAGE = "message"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
