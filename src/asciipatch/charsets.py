# Palettes run from the densest glyph (index 0) to the lightest (index N-1)
EXTENDED = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`. "

REDUCED = "$@%&#/\\|()~,. "

PALETTES = {
    "extended": EXTENDED,
    "reduced": REDUCED,
}
