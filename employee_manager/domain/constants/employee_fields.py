"""Constants for Employee model field names"""


class EmployeeFields:
    """Field name constants for Employee model"""
    ID = "id"
    NAME = "name"
    POSITION = "position"
    EMAIL = "email"
    PHONE = "phone"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Required text fields, in display order
    REQUIRED = (NAME, POSITION, EMAIL, PHONE)
