"""
Lodging image GraphQL type definitions
"""

import strawberry


@strawberry.type(name="Lodging_image")
class LodgingImage:
    lodging_image_id: int
    lodging_id: int
    url: str


@strawberry.input(name="Lodging_imageInput")
class LodgingImageInput:
    lodging_id: int
    url: str
