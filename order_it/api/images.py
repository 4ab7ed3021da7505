from typing import List

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from ..images import ImageStore
from .deps import get_image_store

router = APIRouter(prefix="/api/img", tags=["images"])


# plain def: the file write runs in the threadpool, off the event loop
@router.post("/")
def upload_image(file: UploadFile = File(...), store: ImageStore = Depends(get_image_store)):
    path = store.upload(file.filename, file.file.read())
    return {"uploaded": True, "path": path}


@router.get("/list", response_model=List[str])
def list_images(store: ImageStore = Depends(get_image_store)):
    return store.list_images()


@router.get("/{filename}")
def get_image(filename: str, store: ImageStore = Depends(get_image_store)):
    return FileResponse(store.resolve(filename))


@router.delete("/{filename}")
def delete_image(filename: str, store: ImageStore = Depends(get_image_store)):
    store.delete(filename)
    return {"deleted": True}
