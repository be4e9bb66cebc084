"""Image bookkeeping and the depth-ordered render queue."""

from __future__ import annotations

from dataclasses import dataclass

from .image import Image, Instance, Texture


@dataclass(frozen=True)
class DrawCall:
    """One entry of the render queue: an instance of an image, by index."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        """The instance this draw call refers to."""
        return self.image.instances[self.instance_id]

    @property
    def z(self) -> int:
        return self.instance.z


class Context:
    """Owns the images and the queue of draw calls made from their instances.

    New instances get increasing depths, so later placements are drawn on
    top. The queue is re-sorted by depth lazily, the next time it is asked
    for after a placement or a depth change.
    """

    def __init__(self) -> None:
        self._images: list[Image] = []
        self._queue: list[DrawCall] = []
        self._zdepth = 0
        self._needs_sort = False

    def __contains__(self, image: object) -> bool:
        return any(known is image for known in self._images)

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image of the given size and register it."""
        image = Image(width, height)
        self._images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of ``image`` at (x, y); return its index."""
        image.instances.append(Instance(x, y, self._zdepth, True))
        self._zdepth += 1
        index = len(image.instances) - 1
        self._queue.insert(0, DrawCall(image, index))
        self._needs_sort = True
        return index

    def delete_image(self, image: Image) -> None:
        """Drop every draw call of ``image`` and forget the image itself."""
        self._queue = [call for call in self._queue if call.image is not image]
        for position, known in enumerate(self._images):
            if known is image:
                del self._images[position]
                image.instances.clear()
                break

    def set_instance_depth(self, instance: Instance, zdepth: int) -> None:
        """Change the depth of ``instance``; the queue is re-sorted when next read."""
        if instance.z == zdepth:
            return
        instance.z = zdepth
        self._needs_sort = True

    def texture_to_image(self, texture: Texture) -> Image:
        """Create a new image holding a copy of the texture's pixels."""
        image = self.new_image(texture.width, texture.height)
        size = len(texture.pixels)
        image.pixels[:size] = texture.pixels
        return image

    def _sort(self) -> None:
        # Entries of equal depth end up in the reverse of their queue order.
        self._queue = sorted(reversed(self._queue), key=lambda call: call.z)

    def render_queue(self) -> list[DrawCall]:
        """Return the draw calls in drawing order, sorting them first if needed."""
        if self._needs_sort:
            self._needs_sort = False
            self._sort()
        return list(self._queue)

    def visible_draw_calls(self) -> list[DrawCall]:
        """Return the draw calls whose image and instance are both enabled."""
        return [
            call
            for call in self.render_queue()
            if call.image.enabled and call.instance.enabled
        ]