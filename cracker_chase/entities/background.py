from cracker_chase.entities.base_entity import BaseEntity


class Background(BaseEntity):
    """Full-canvas backdrop, drawn first every frame and on the start screen."""

    __slots__ = ()

    def __init__(self, game, image_path):
        super().__init__(game, image_path, game.canvas_width, game.canvas_height)
