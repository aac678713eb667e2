from ninja import Schema


class ProductPackageSchema(Schema):
    """Schema for a product package"""

    id: int
