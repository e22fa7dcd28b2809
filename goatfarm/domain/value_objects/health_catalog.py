from __future__ import annotations

KNOWN_VACCINES = ("Rabies", "CDT", "Clostridium", "FootAndMouth")
KNOWN_DISEASES = ("FootRot", "Mastitis", "Parasites", "Pneumonia")
