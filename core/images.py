# core/images.py

import logging
import os
from io import BytesIO

from django.core.files.base import ContentFile
from PIL import Image

logger = logging.getLogger(__name__)

"""
Shrinks an uploaded image so it fits inside max_size and re-encodes
it as JPEG. Images that already fit are returned untouched. If Pillow
can't read the file the original upload is kept, so a bad image never
blocks saving the rest of a profile.
"""
def downscale_image(image_file, max_size, quality=75):
    # The file pointer must be at the start before Pillow reads it
    if hasattr(image_file, 'seek'):
        image_file.seek(0)

    try:
        img = Image.open(image_file)
        if img.width <= max_size[0] and img.height <= max_size[1]:
            # Image.open() may have read from the file
            if hasattr(image_file, 'seek'):
                image_file.seek(0)
            return image_file

        if img.mode != 'RGB':
            img = img.convert('RGB')
        img.thumbnail(max_size, Image.Resampling.LANCZOS)

        output = BytesIO()
        img.save(output, format='JPEG', quality=quality)
        output.seek(0)
        new_name = os.path.splitext(os.path.basename(image_file.name))[0] + '.jpg'
        return ContentFile(output.read(), name=new_name)
    except (OSError, ValueError) as e:
        logger.warning("Could not optimize image %s: %s", getattr(image_file, 'name', '?'), e)
        if hasattr(image_file, 'seek'):
            image_file.seek(0)
        return image_file
