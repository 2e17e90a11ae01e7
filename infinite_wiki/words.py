# Curated words and phrases for the random button. Duplicates are intentional
# leftovers of merging several lists; UNIQUE_WORDS is what callers draw from.
PREDEFINED_WORDS = [
    # List 1
    "Balance", "Harmony", "Discord", "Unity", "Fragmentation", "Clarity", "Ambiguity",
    "Presence", "Absence", "Creation", "Destruction", "Light", "Dark", "Beginning",
    "Ending", "Rising", "Falling", "Connection", "Isolation", "Hope", "Despair",
    # Complex phrases from List 1
    "Order and chaos", "Light and shadow", "Sound and silence", "Form and formlessness",
    "Being and nonbeing", "Presence and absence", "Motion and stillness",
    "Unity and multiplicity", "Finite and infinite", "Sacred and profane",
    "Memory and forgetting", "Question and answer", "Search and discovery",
    "Journey and destination", "Dream and reality", "Time and eternity",
    "Self and other", "Known and unknown", "Spoken and unspoken", "Visible and invisible",
    # List 2
    "Zigzag", "Waves", "Spiral", "Bounce", "Slant", "Drip", "Stretch", "Squeeze",
    "Float", "Fall", "Spin", "Melt", "Rise", "Twist", "Explode", "Stack", "Mirror",
    "Echo", "Vibrate",
    # List 3
    "Gravity", "Friction", "Momentum", "Inertia", "Turbulence", "Pressure", "Tension",
    "Oscillate", "Fractal", "Quantum", "Entropy", "Vortex", "Resonance", "Equilibrium",
    "Centrifuge", "Elastic", "Viscous", "Refract", "Diffuse", "Cascade", "Levitate",
    "Magnetize", "Polarize", "Accelerate", "Compress", "Waves",
    # List 4
    "Liminal", "Ephemeral", "Paradox", "Zeitgeist", "Metamorphosis", "Synesthesia",
    "Recursion", "Emergence", "Dialectic", "Apophenia", "Limbo", "Flux", "Sublime",
    "Uncanny", "Palimpsest", "Chimera", "Void", "Transcend", "Ineffable", "Qualia",
    "Gestalt", "Simulacra", "Abyssal",
    # List 5
    "Existential", "Nihilism", "Solipsism", "Phenomenology", "Hermeneutics",
    "Deconstruction", "Postmodern", "Absurdism", "Catharsis", "Epiphany", "Melancholy",
    "Nostalgia", "Longing", "Reverie", "Pathos", "Ethos", "Logos", "Mythos", "Anamnesis",
    "Intertextuality", "Metafiction", "Stream", "Lacuna", "Caesura", "Enjambment",
]

UNIQUE_WORDS = list(dict.fromkeys(PREDEFINED_WORDS))
