# ==============================================================================
# FILE: api.py
# DESCRIPTION: FastAPI implementation for the Box Packer.
#              Provides endpoints to find the optimal product orientation
#              inside a container and to rotate product dimensions.
# ==============================================================================
import logging
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List

from environment.errors import DomainError, InvalidDimension
from environment.orientation import CANONICAL_ORIENTATIONS, Orientation
from environment.prism import Prism
from environment.rotation import rotate
from environment.product import Container, Product
from packing.search import evaluate_orientations
from packing.session import BoxPacker

logger = logging.getLogger(__name__)

app = FastAPI(title="Box Packer Orientation API")

# ------------------------------------------------------------------------------
# DATA MODELS
# ------------------------------------------------------------------------------

class Dimensions(BaseModel):
    height: float
    width: float
    depth: float

    def to_prism(self) -> Prism:
        return Prism(self.height, self.width, self.depth)


class OrientationRequest(BaseModel):
    container: Dimensions
    product: Dimensions


class RotateRequest(BaseModel):
    product: Dimensions
    orientation: List[int] = [0, 0, 0]


def _prism_dict(prism: Prism) -> dict:
    return {"height": prism.height, "width": prism.width, "depth": prism.depth}

# ------------------------------------------------------------------------------
# ENDPOINTS
# ------------------------------------------------------------------------------

@app.get("/orientations")
async def list_orientations():
    """
    List the canonical orientation codes in the order they are searched.
    """
    return {
        "orientations": [
            {"code": list(o.as_tuple()), "description": o.describe()}
            for o in CANONICAL_ORIENTATIONS
        ]
    }


@app.post("/orientation")
async def optimal_orientation(request: OrientationRequest):
    """
    Find the orientation that packs the most products into the container.
    """
    try:
        container = request.container.to_prism()
        product = request.product.to_prism()
    except InvalidDimension as e:
        logger.warning("Rejected packing request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    packer = BoxPacker(Container(container), Product(product))
    try:
        result = packer.pack()
        candidates = evaluate_orientations(container, product)
    except DomainError as e:
        logger.warning("Packing request cannot be divided into a grid: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    response = result.to_dict()
    response["candidates"] = [
        {"orientation": list(o.as_tuple()), "packable_units": count}
        for o, count in candidates
    ]
    return response


@app.post("/rotate")
async def rotate_product(request: RotateRequest):
    """
    Return the product dimensions under the given orientation code.
    """
    try:
        product = request.product.to_prism()
        orientation = Orientation.from_tuple(request.orientation)
    except (InvalidDimension, ValueError) as e:
        logger.warning("Rejected rotate request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "orientation": list(orientation.as_tuple()),
        "rotated_dimensions": _prism_dict(rotate(product, orientation)),
    }
