# chatgen/images/router.py
from fastapi import APIRouter, Depends, Request

from chatgen.images.schemas import ImageIn, ImageOut
from chatgen.images.service import ImageClient

router = APIRouter(tags=["images"])


def get_image_client(request: Request) -> ImageClient:
    return request.app.state.image_client


@router.post("/generate-image", response_model=ImageOut)
async def generate_image(payload: ImageIn, client: ImageClient = Depends(get_image_client)):
    return ImageOut(imageUrl=await client.generate(payload.prompt))
