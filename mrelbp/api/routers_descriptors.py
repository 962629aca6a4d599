from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import Dict, List
import os

from mrelbp.api.dependencies import get_parameters
from mrelbp.main.descriptors.batch import describe_image
from mrelbp.main.descriptors.parameters import Parameters
from mrelbp.main.utils.errors import DescriptorError
from mrelbp.main.utils.io_utils import load_grayscale

router = APIRouter(prefix="/descriptors", tags=["descriptors"])

class DescriptorRequest(BaseModel):
    image_path: str = Field(..., description="Local grayscale image path")
    standardize: bool = Field(False, description="Apply local Gaussian standardization first")
    radius: int | None = Field(None, ge=1)
    large_radius: int | None = Field(None, ge=1)
    neighbours: int | None = Field(None, ge=1, le=24)

class DescriptorResponse(BaseModel):
    mode: str
    shape: List[int]
    histograms: Dict[str, List[int]]


def _describe(req: DescriptorRequest, params: Parameters, mode: str) -> DescriptorResponse:
    if not os.path.isfile(req.image_path):
        raise HTTPException(status_code=404, detail='Image not found')
    params = params.with_overrides(radius=req.radius, large_radius=req.large_radius, neighbours=req.neighbours)
    try:
        image = load_grayscale(req.image_path)
        images, hists = describe_image(image, params, mode, req.standardize)
    except DescriptorError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    shape = list(images['S'].shape)
    return DescriptorResponse(mode=mode, shape=shape, histograms={k: [int(v) for v in h] for k, h in hists.items()})

@router.post('/lbp', response_model=DescriptorResponse, summary="Rotation-invariant uniform LBP histogram")
def describe_lbp(req: DescriptorRequest, params: Parameters = Depends(get_parameters)):
    return _describe(req, params, 'lbp')

@router.post('/mrelbp', response_model=DescriptorResponse, summary="MRELBP L/S/R and center histograms")
def describe_mrelbp(req: DescriptorRequest, params: Parameters = Depends(get_parameters)):
    return _describe(req, params, 'mrelbp')
