import os
from PIL import Image, ImageDraw

# Constants
HOLE_WIDTH = 185  # Three holes across a 561 px window
HOLE_HEIGHT = 118  # Three rows above the Start/Stop bar
BACKGROUND_COLOR = (96, 160, 72)  # Grass
HOLE_COLOR = (52, 34, 20)  # Dark soil
RIM_COLOR = (120, 84, 48)  # Dug-up earth around the hole
MOLE_COLOR = (110, 78, 58)  # Fur
SNOUT_COLOR = (232, 150, 150)  # Pink nose
EYE_COLOR = (0, 0, 0)

# Hole ellipse sits in the lower part of the image
HOLE_BOX = (30, 72, HOLE_WIDTH - 30, 108)
RIM_BOX = (22, 66, HOLE_WIDTH - 22, 114)

OUTPUT_DIR = 'assets'


def draw_hole(draw):
    """Draw the empty hole on the grass"""
    draw.ellipse(RIM_BOX, fill=RIM_COLOR)
    draw.ellipse(HOLE_BOX, fill=HOLE_COLOR)


def draw_mole(draw, top):
    """Draw the mole's head and body with the top of its head at y=top"""
    cx = HOLE_WIDTH // 2
    body_bottom = (HOLE_BOX[1] + HOLE_BOX[3]) // 2
    draw.rounded_rectangle((cx - 30, top, cx + 30, body_bottom), radius=28, fill=MOLE_COLOR)

    # Eyes and snout
    eye_y = top + 18
    draw.ellipse((cx - 14, eye_y, cx - 7, eye_y + 7), fill=EYE_COLOR)
    draw.ellipse((cx + 7, eye_y, cx + 14, eye_y + 7), fill=EYE_COLOR)
    draw.ellipse((cx - 8, eye_y + 12, cx + 8, eye_y + 24), fill=SNOUT_COLOR)

    # Redraw the front lip of the hole so the mole sits inside it
    lip_top = body_bottom
    draw.chord(RIM_BOX, 0, 180, fill=RIM_COLOR)
    draw.chord((HOLE_BOX[0], lip_top - 4, HOLE_BOX[2], HOLE_BOX[3]), 0, 180, fill=HOLE_COLOR)


def create_hole_image(state):
    """Create the image for a hole state ('empty', 'out' or 'in')"""
    img = Image.new('RGB', (HOLE_WIDTH, HOLE_HEIGHT), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    draw_hole(draw)

    if state == 'out':
        draw_mole(draw, top=10)
    elif state == 'in':
        # Only the top of the head still shows
        draw_mole(draw, top=52)

    return img


def generate_all_hole_images():
    """Generate the empty, out and in images used by the game"""
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    for state in ('empty', 'out', 'in'):
        img = create_hole_image(state)
        img.save(os.path.join(OUTPUT_DIR, f'{state}.png'))
        print(f"Generated hole image: {state}.png")


if __name__ == "__main__":
    generate_all_hole_images()
    print("All hole images generated!")
