"""
Starting content for new accounts and the global gear table.
"""

DEFAULT_QUEST_LABELS = [
    ("calorie",  "Calorie Goal"),
    ("macro",    "Macro Goal"),
    ("gym",      "Gym Session"),
    ("water",    "Drink 3L Water"),
    ("scroll",   "Doomscrolling"),
    ("junkfood", "Junk Food"),
    ("alcohol",  "Alcohol"),
]

DEFAULT_QUESTS = [
    {"name": "Hit gym 5 days in a week",            "tag": "weekly",  "xp": 200},
    {"name": "All 5 habits in a single day",        "tag": "weekly",  "xp": 150},
    {"name": "7 days no doomscrolling",             "tag": "weekly",  "xp": 200},
    {"name": "Hit calorie goal 20 days in a month", "tag": "monthly", "xp": 400},
    {"name": "10 perfect days in a single month",   "tag": "boss",    "xp": 600},
    {"name": "Finish a book",                       "tag": "monthly", "xp": 200},
    {"name": "Complete a course or certification",  "tag": "monthly", "xp": 300},
    {"name": "Secure a job offer",                  "tag": "boss",    "xp": 1000},
    {"name": "Get back to a 5-mile run",            "tag": "weekly",  "xp": 300},
    {"name": "30-day gym streak",                   "tag": "boss",    "xp": 800},
    {"name": "Lose 10 lbs",                         "tag": "monthly", "xp": 500},
]

REGION_BOSSES = [
    ("ashen",   1,  "The Scavenger King",        "Lord of the Rubble"),
    ("ashen",   2,  "Warden of the Rust",        "Keeper of the Dead Quarter"),
    ("ashen",   3,  "The Ash Revenant",          "Risen from the Grey"),
    ("ashen",   4,  "The Industrial Phantom",    "Ghost of the Smokestacks"),
    ("ashen",   5,  "Lord of the Broken City",   "Final Warden of the Ash"),
    ("savanna", 6,  "The Red Dust Herald",       "Harbinger of the Plains"),
    ("savanna", 7,  "The Elder Horned",          "Ancient Beast of the Herd"),
    ("savanna", 8,  "Warlord of the Red Stone",  "Champion of the Kingdom"),
    ("savanna", 9,  "The Twilight Stalker",      "Predator at Dusk"),
    ("savanna", 10, "The Crimson Sovereign",     "High King of the Savanna"),
    ("abyss",   11, "The Root Warden",           "First Guardian of the Deep"),
    ("abyss",   12, "The Bioluminescent Horror", "Ancient of the Canopy"),
    ("abyss",   13, "Temple Construct",          "Stone Golem of the Ancients"),
    ("abyss",   14, "The Venomweaver",           "Silk Empress of the Abyss"),
    ("abyss",   15, "The Verdant God",           "Awakened Heart of the Jungle"),
    ("throne",  16, "The Void Sentinel",         "First Gate of the Throne"),
    ("throne",  17, "The Fractured Knight",      "Broken Champion of the Void"),
    ("throne",  18, "The Echo of All Realms",    "Memory Given Form"),
    ("throne",  19, "The Undying Emperor",       "He Who Would Not Fall"),
    ("throne",  20, "The Shadow Self",           "Final Boss: Your True Enemy"),
]

MAP_GEAR = [
    ("ashen",   "weapon", "Rusted Iron Blade",      1),
    ("ashen",   "armour", "Scavenger's Coat",       2),
    ("savanna", "weapon", "Maasai War Spear",       6),
    ("savanna", "armour", "Warrior's Skins",        6),
    ("abyss",   "weapon", "Bioluminescent Fang",    11),
    ("abyss",   "armour", "Temple Guardian Plate",  11),
    ("throne",  "weapon", "Shadow Sovereign Blade", 16),
    ("throne",  "armour", "Void Emperor's Mantle",  16),
]
