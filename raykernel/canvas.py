import numpy as np
from PIL import Image
from raykernel.color import Color

PPM_MAX_LINE = 70


class Canvas:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)  # (height, width, rgb)

    def _check(self, col: int, row: int):
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"Pixel ({col}, {row}) outside {self.width}x{self.height} canvas")

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def write_pixel(self, col: int, row: int, color: Color):
        self._check(col, row)
        self.pixels[row, col] = (color.r, color.g, color.b)

    def pixel_at(self, col: int, row: int) -> Color:
        self._check(col, row)
        r, g, b = self.pixels[row, col]
        return Color(r, g, b)

    def to_bytes_array(self) -> np.ndarray:
        """Clamp and quantize every channel to 0-255: <0 -> 0, >1 -> 255, else ceil(v * 255)."""
        scaled = np.ceil(self.pixels * 255)
        scaled = np.where(self.pixels < 0, 0, scaled)
        scaled = np.where(self.pixels > 1, 255, scaled)
        return np.clip(scaled, 0, 255).astype(np.uint8)

    def to_ppm(self) -> str:
        lines = ["P3", f"{self.width} {self.height}", "255"]
        data = self.to_bytes_array()
        for row in data:
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) <= PPM_MAX_LINE:
                    line += " " + token
                else:
                    lines.append(line)
                    line = token
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_bytes_array())

    def save(self, path: str):
        if path.lower().endswith(".ppm"):
            with open(path, "w") as f:
                f.write(self.to_ppm())
        else:
            self.to_image().save(path)
