GEMSTONE_PROMPT = (
    "Analyze this gemstone image for educational purposes and provide the following information:\n"
    "1. Gemstone identification (name, type, color range, crystal system, transparency, primary sources)\n"
    "2. Physical properties (hardness on Mohs scale, specific gravity, luster, cleavage, refractive index, "
    "characteristic features)\n"
    "3. Formation and geology (origin, formation process, geological age, associated minerals, "
    "environmental conditions)\n"
    "4. Value and collection (value factors, commercial grade, common treatments, care requirements, "
    "popular cuts)\n"
    "5. Cultural and metaphysical aspects (historical significance, traditional uses, birthstone information, "
    "cultural associations)\n"
    "\n"
    "IMPORTANT: This is for educational purposes only."
)

# Shown alongside the bundled default image; no API call is made for it.
DEFAULT_ANALYSIS = """1. Gemstone Identification:
- Name: Amethyst
- Type: Variety of Quartz (SiO2)
- Color Range: Pale lilac to deep purple
- Crystal System: Hexagonal (trigonal)
- Transparency: Transparent to translucent
- Primary Sources: Brazil, Uruguay, Zambia, Russia, South Korea

2. Physical Properties:
- Hardness: 7 on Mohs scale
- Specific Gravity: 2.65-2.66
- Luster: Vitreous (glass-like)
- Cleavage: None (conchoidal fracture)
- Refractive Index: 1.544-1.553
- Characteristic Features: Color zoning, pleochroism (different colors when viewed from different angles)

3. Formation & Geology:
- Origin: Forms in silica-rich geodes and volcanic rocks
- Formation Process: Crystallizes from silicon dioxide with iron impurities and radiation exposure
- Geological Age: Found in rocks of various ages, particularly volcanic and metamorphic
- Associated Minerals: Often found with citrine, clear quartz, and agate
- Environmental Conditions: Forms in gas cavities in lava, hydrothermal veins, or metamorphic deposits

4. Value & Collection:
- Value Factors: Color intensity (deep purple most valuable), clarity, size, and cut
- Commercial Grade: AA (high quality) to B (lower quality)
- Common Treatments: Heat treatment to enhance color (often changes to citrine when heated)
- Care Requirements: Avoid prolonged sun exposure, clean with mild soap and water
- Popular Cuts: Faceted, cabochon, beads, and tumbled stones

5. Cultural & Metaphysical Aspects:
- Historical Significance: Named from Greek "amethystos" meaning "not intoxicated" (believed to prevent drunkenness)
- Traditional Uses: Jewelry, protective amulets, religious artifacts
- Birthstone: February
- Chakra Association: Third eye and crown chakras in crystal healing practices
- Cultural Beliefs: Associated with clarity of thought, peace, and protection"""
