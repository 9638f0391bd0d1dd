"""Starter sport and exercise catalog."""

from typing import Any, Dict, List

from fitassess.models.exercise import ExerciseDifficulty

BEGINNER = ExerciseDifficulty.BEGINNER
INTERMEDIATE = ExerciseDifficulty.INTERMEDIATE
ADVANCED = ExerciseDifficulty.ADVANCED

SPORTS: List[Dict[str, Any]] = [
    {
        "name": "Cricket",
        "icon": "🏏",
        "color_primary": "#4CAF50",
        "color_secondary": "#2E7D32",
        "image": "https://images.unsplash.com/photo-1531415074968-036ba1b575da?w=400",
        "description": "Cricket fitness exercises to improve batting, bowling, and fielding performance.",
    },
    {
        "name": "Basketball",
        "icon": "🏀",
        "color_primary": "#FF9800",
        "color_secondary": "#E65100",
        "image": "https://images.unsplash.com/photo-1546519638-68e109498ffc?w=400",
        "description": "Basketball training exercises for agility, jumping, and court performance.",
    },
    {
        "name": "Swimming",
        "icon": "🏊",
        "color_primary": "#2196F3",
        "color_secondary": "#0D47A1",
        "image": "https://images.unsplash.com/photo-1530549387789-4c1017266635?w=400",
        "description": "Swimming drills and exercises to improve stroke technique and endurance.",
    },
    {
        "name": "Volleyball",
        "icon": "🏐",
        "color_primary": "#9C27B0",
        "color_secondary": "#6A1B9A",
        "image": "https://images.unsplash.com/photo-1612872087720-bb876e2e67d1?w=400",
        "description": "Volleyball exercises focusing on jumping, spiking, and defensive movements.",
    },
    {
        "name": "Kabaddi",
        "icon": "🤼",
        "color_primary": "#F44336",
        "color_secondary": "#C62828",
        "image": "https://images.unsplash.com/photo-1587280501635-68a0e82cd5ff?w=400",
        "description": "Kabaddi training for strength, agility, and raiding techniques.",
    },
    {
        "name": "Football",
        "icon": "⚽",
        "color_primary": "#00BCD4",
        "color_secondary": "#00838F",
        "image": "https://images.unsplash.com/photo-1574629810360-7efbbe195018?w=400",
        "description": "Football exercises for dribbling, shooting, and overall fitness.",
    },
    {
        "name": "Tennis",
        "icon": "🎾",
        "color_primary": "#CDDC39",
        "color_secondary": "#9E9D24",
        "image": "https://images.unsplash.com/photo-1554068865-24cecd4e34b8?w=400",
        "description": "Tennis training for serves, volleys, and court movement.",
    },
    {
        "name": "Athletics",
        "icon": "🏃",
        "color_primary": "#FF5722",
        "color_secondary": "#BF360C",
        "image": "https://images.unsplash.com/photo-1571019614242-c5c5dee9f50b?w=400",
        "description": "Track and field exercises for running, jumping, and throwing events.",
    },
]

# Keyed by sport name
EXERCISES: Dict[str, List[Dict[str, Any]]] = {
    "Cricket": [
        {
            "name": "Shadow Batting",
            "description": "Practice batting stance and shots without a ball to improve technique and muscle memory.",
            "icon": "🏏",
            "image": "https://images.unsplash.com/photo-1624526267942-ab0ff8a3e972?w=400",
            "duration": 300,
            "difficulty": BEGINNER,
            "muscle_groups": ["Arms", "Core", "Shoulders"],
            "equipment": ["Bat"],
            "instructions": [
                "Take your batting stance",
                "Practice defensive shots",
                "Work on drive shots",
                "Practice pull and cut shots",
                "Focus on footwork",
            ],
            "benefits": ["Improved technique", "Better muscle memory", "Enhanced footwork"],
            "calories": 80,
            "sets": 3,
            "reps": 10,
        },
        {
            "name": "Bowling Run-up Drill",
            "description": "Perfect your bowling run-up and delivery action with this focused drill.",
            "icon": "🎳",
            "duration": 600,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Legs", "Core", "Shoulders", "Arms"],
            "equipment": ["Cricket ball", "Stumps"],
            "instructions": [
                "Mark your run-up distance",
                "Practice approach rhythm",
                "Focus on gather position",
                "Work on arm rotation",
                "Follow through properly",
            ],
            "benefits": ["Consistent delivery", "Better accuracy", "Reduced injury risk"],
            "calories": 150,
            "sets": 5,
            "reps": 6,
        },
        {
            "name": "Catching Practice",
            "description": "Improve your catching reflexes and hand-eye coordination.",
            "icon": "🤲",
            "duration": 450,
            "difficulty": BEGINNER,
            "muscle_groups": ["Hands", "Arms", "Core"],
            "equipment": ["Cricket ball"],
            "instructions": [
                "Start with soft catches",
                "Progress to hard catches",
                "Practice one-handed catches",
                "Work on diving catches",
                "Train peripheral vision catches",
            ],
            "benefits": ["Better reflexes", "Improved hand-eye coordination", "Confident fielding"],
            "calories": 100,
            "sets": 4,
            "reps": 15,
        },
    ],
    "Basketball": [
        {
            "name": "Layup Drills",
            "description": "Practice various layup techniques to score easily near the basket.",
            "icon": "🏀",
            "image": "https://images.unsplash.com/photo-1519861531473-9200262188bf?w=400",
            "duration": 600,
            "difficulty": BEGINNER,
            "muscle_groups": ["Legs", "Core", "Arms"],
            "equipment": ["Basketball", "Hoop"],
            "instructions": [
                "Start from the right side",
                "Dribble towards the basket",
                "Take off from left foot",
                "Extend right arm for layup",
                "Aim for backboard sweet spot",
            ],
            "benefits": ["Improved scoring", "Better footwork", "Enhanced coordination"],
            "calories": 120,
            "sets": 4,
            "reps": 10,
        },
        {
            "name": "Defensive Slides",
            "description": "Build lateral quickness and defensive positioning skills.",
            "icon": "🛡️",
            "duration": 300,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Legs", "Core", "Glutes"],
            "equipment": ["Cones"],
            "instructions": [
                "Get in defensive stance",
                "Slide laterally between cones",
                "Keep hips low",
                "Maintain balance",
                "React to direction changes",
            ],
            "benefits": ["Better defense", "Improved agility", "Stronger legs"],
            "calories": 100,
            "sets": 5,
            "reps": 8,
        },
        {
            "name": "Jump Shot Practice",
            "description": "Perfect your shooting form and accuracy from various spots.",
            "icon": "🎯",
            "duration": 900,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Arms", "Shoulders", "Legs"],
            "equipment": ["Basketball", "Hoop"],
            "instructions": [
                "Set feet shoulder-width apart",
                "Hold ball in shooting pocket",
                "Jump and release at peak",
                "Follow through with wrist",
                "Practice from multiple spots",
            ],
            "benefits": ["Improved accuracy", "Consistent form", "Better range"],
            "calories": 150,
            "sets": 5,
            "reps": 10,
        },
    ],
    "Swimming": [
        {
            "name": "Freestyle Technique Drill",
            "description": "Focus on proper freestyle stroke mechanics and breathing.",
            "icon": "🏊",
            "image": "https://images.unsplash.com/photo-1600965962361-9035dbfd1c50?w=400",
            "duration": 1200,
            "difficulty": BEGINNER,
            "muscle_groups": ["Arms", "Core", "Shoulders", "Back"],
            "equipment": ["Pool", "Goggles"],
            "instructions": [
                "Start with body position drill",
                "Practice catch and pull",
                "Work on bilateral breathing",
                "Focus on hip rotation",
                "Maintain streamlined kick",
            ],
            "benefits": ["Improved technique", "Better efficiency", "Faster times"],
            "calories": 200,
            "sets": 4,
            "reps": 50,
        },
        {
            "name": "Kick Sets",
            "description": "Strengthen your kick for better propulsion and body position.",
            "icon": "🦵",
            "duration": 600,
            "difficulty": BEGINNER,
            "muscle_groups": ["Legs", "Core", "Glutes"],
            "equipment": ["Pool", "Kickboard"],
            "instructions": [
                "Hold kickboard extended",
                "Keep legs straight but relaxed",
                "Kick from hips, not knees",
                "Maintain small, fast kicks",
                "Keep head down between breaths",
            ],
            "benefits": ["Stronger kick", "Better endurance", "Improved body position"],
            "calories": 150,
            "sets": 6,
            "reps": 25,
        },
    ],
    "Volleyball": [
        {
            "name": "Spike Approach",
            "description": "Master the footwork and timing for powerful spikes.",
            "icon": "🏐",
            "image": "https://images.unsplash.com/photo-1592656094267-764a45160876?w=400",
            "duration": 600,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Legs", "Core", "Shoulders", "Arms"],
            "equipment": ["Volleyball", "Net"],
            "instructions": [
                "Start behind attack line",
                "Take explosive 3-step approach",
                "Plant both feet for jump",
                "Swing arm back and snap",
                "Follow through towards target",
            ],
            "benefits": ["Powerful spikes", "Better timing", "Improved vertical"],
            "calories": 180,
            "sets": 4,
            "reps": 12,
        },
        {
            "name": "Passing Drills",
            "description": "Improve ball control and platform consistency.",
            "icon": "🤲",
            "duration": 450,
            "difficulty": BEGINNER,
            "muscle_groups": ["Arms", "Core", "Legs"],
            "equipment": ["Volleyball"],
            "instructions": [
                "Form proper platform",
                "Bend knees for stability",
                "Contact ball on forearms",
                "Direct pass to target",
                "Move feet to ball",
            ],
            "benefits": ["Better ball control", "Consistent passes", "Improved teamwork"],
            "calories": 80,
            "sets": 5,
            "reps": 20,
        },
    ],
    "Kabaddi": [
        {
            "name": "Raiding Practice",
            "description": "Practice raiding techniques including toe touch and hand touch.",
            "icon": "🤼",
            "image": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=400",
            "duration": 600,
            "difficulty": ADVANCED,
            "muscle_groups": ["Legs", "Core", "Arms", "Full Body"],
            "equipment": ["Mat"],
            "instructions": [
                "Practice toe touch raids",
                "Work on hand touches",
                "Develop escape moves",
                "Train quick turns",
                "Build cant rhythm",
            ],
            "benefits": ["Effective raids", "Better agility", "Improved scoring"],
            "calories": 200,
            "sets": 5,
            "reps": 10,
        },
        {
            "name": "Ankle Hold Defense",
            "description": "Master the ankle hold technique for strong defense.",
            "icon": "🦶",
            "duration": 450,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Arms", "Core", "Grip Strength"],
            "equipment": ["Mat", "Partner"],
            "instructions": [
                "Time the raider approach",
                "Get low and grip ankle",
                "Pull back and down",
                "Work with chain formation",
                "Practice quick reactions",
            ],
            "benefits": ["Strong defense", "Better grip", "Team coordination"],
            "calories": 150,
            "sets": 4,
            "reps": 8,
        },
    ],
    "Football": [
        {
            "name": "Dribbling Cones",
            "description": "Improve ball control and dribbling through cone obstacles.",
            "icon": "⚽",
            "image": "https://images.unsplash.com/photo-1579952363873-27f3bade9f55?w=400",
            "duration": 600,
            "difficulty": BEGINNER,
            "muscle_groups": ["Legs", "Core", "Ankles"],
            "equipment": ["Football", "Cones"],
            "instructions": [
                "Set up cone slalom",
                "Use inside and outside foot",
                "Keep ball close to feet",
                "Accelerate between cones",
                "Focus on both feet equally",
            ],
            "benefits": ["Better ball control", "Improved agility", "Quick feet"],
            "calories": 120,
            "sets": 4,
            "reps": 5,
        },
        {
            "name": "Shooting Practice",
            "description": "Work on shooting accuracy and power from various positions.",
            "icon": "🥅",
            "duration": 900,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Legs", "Core", "Hip Flexors"],
            "equipment": ["Football", "Goal"],
            "instructions": [
                "Practice instep shots",
                "Work on placed finishes",
                "Try volleys and half-volleys",
                "Shoot from different angles",
                "Focus on both feet",
            ],
            "benefits": ["Improved finishing", "Better power", "Accurate shots"],
            "calories": 160,
            "sets": 5,
            "reps": 10,
        },
    ],
    "Tennis": [
        {
            "name": "Serve Practice",
            "description": "Perfect your serve technique for power and accuracy.",
            "icon": "🎾",
            "image": "https://images.unsplash.com/photo-1595435934249-5df7ed86e1c0?w=400",
            "duration": 900,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Shoulders", "Core", "Legs", "Arms"],
            "equipment": ["Tennis racket", "Tennis balls", "Court"],
            "instructions": [
                "Practice ball toss consistency",
                "Work on trophy position",
                "Focus on pronation at contact",
                "Develop kick and slice serves",
                "Aim for specific targets",
            ],
            "benefits": ["Powerful serves", "Better accuracy", "Free points"],
            "calories": 150,
            "sets": 4,
            "reps": 15,
        },
        {
            "name": "Groundstroke Rally",
            "description": "Build consistent and powerful forehand and backhand strokes.",
            "icon": "🔄",
            "duration": 1200,
            "difficulty": BEGINNER,
            "muscle_groups": ["Arms", "Core", "Legs", "Shoulders"],
            "equipment": ["Tennis racket", "Tennis balls", "Court"],
            "instructions": [
                "Start with crosscourt rallies",
                "Focus on topspin technique",
                "Maintain ready position",
                "Use proper footwork",
                "Aim for consistent depth",
            ],
            "benefits": ["Consistent strokes", "Better rally ability", "Improved fitness"],
            "calories": 200,
            "sets": 3,
            "reps": 50,
        },
    ],
    "Athletics": [
        {
            "name": "Sprint Drills",
            "description": "Improve acceleration and top-end speed with these drills.",
            "icon": "🏃",
            "image": "https://images.unsplash.com/photo-1552674605-db6ffd4facb5?w=400",
            "duration": 900,
            "difficulty": INTERMEDIATE,
            "muscle_groups": ["Legs", "Core", "Glutes", "Hip Flexors"],
            "equipment": ["Track", "Starting blocks"],
            "instructions": [
                "Practice block starts",
                "Work on acceleration phase",
                "Develop max velocity technique",
                "Focus on arm action",
                "Train deceleration control",
            ],
            "benefits": ["Faster starts", "Improved speed", "Better race execution"],
            "calories": 250,
            "sets": 6,
            "reps": 4,
        },
        {
            "name": "Long Jump Technique",
            "description": "Master the approach, takeoff, and landing for long jump.",
            "icon": "🦘",
            "duration": 1200,
            "difficulty": ADVANCED,
            "muscle_groups": ["Legs", "Core", "Glutes", "Full Body"],
            "equipment": ["Runway", "Sand pit"],
            "instructions": [
                "Measure and mark approach",
                "Build speed progressively",
                "Hit board with penultimate step",
                "Drive knee up on takeoff",
                "Use hitch-kick or hang technique",
            ],
            "benefits": ["Greater distance", "Better technique", "Consistent jumps"],
            "calories": 200,
            "sets": 5,
            "reps": 6,
        },
    ],
}
