"""
Chat link constants.
This file centralizes the magic numbers of the chat link formats.
"""

# Link type discriminants (first byte of a decoded payload)
WARDROBE_SKIN_LINK_TYPE = 0x0A  # Single wardrobe skin
EQUIPMENT_TEMPLATE_TYPE = 0x0F  # Equipment / fashion template

# Payload Layout Constants
MIN_TEMPLATE_PAYLOAD_LENGTH = 97  # Shortest decodable fashion template payload (bytes)
TEMPLATE_FIELD_SIZE = 2  # Skin and dye ids are little-endian uint16
DYE_CHANNELS_PER_SLOT = 4  # Paintable channels per armor piece

# Wardrobe Skin Link Constants
SKIN_ID_FIELD_SIZE = 3  # Skin id is a little-endian 24-bit integer
MAX_SKIN_ID = 0xFFFFFF  # Largest id a wardrobe skin link can carry

# Sentinel ids
EMPTY_ID = 0  # Slot or dye channel not set
NO_DYE_SENTINEL = 1  # "Dye Remover" / default dye, also treated as unset

# Display Constants
DEFAULT_ABBREVIATION_LENGTH = 50  # Characters kept when shortening a code for display
