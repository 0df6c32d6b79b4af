"""Demo records loaded into the in-memory stores when SEED_DEMO_DATA is on."""

CROPS = [
    {
        "id": "1",
        "name": "Tomatoes",
        "variety": "Cherry",
        "planting_date": "2024-01-15",
        "expected_harvest_date": "2024-04-15",
        "field_size": 2.5,
        "growth_stage": "fruiting",
        "location": "Field A",
        "notes": "Using organic fertilizers",
        "status": "active",
        "created_date": "2024-01-15T00:00:00Z",
    },
    {
        "id": "2",
        "name": "Wheat",
        "variety": "Durum",
        "planting_date": "2024-02-01",
        "expected_harvest_date": "2024-06-01",
        "field_size": 5.0,
        "growth_stage": "vegetative",
        "location": "Field B",
        "notes": "Irrigated crop",
        "status": "active",
        "created_date": "2024-02-01T00:00:00Z",
    },
]

POSTS = [
    {
        "id": "1",
        "title": "Best time to plant tomatoes in Punjab?",
        "content": (
            "I am planning to start tomato cultivation this season. What would be "
            "the best time to plant tomatoes in Punjab region? Any specific variety "
            "recommendations?"
        ),
        "category": "question",
        "location": "Punjab",
        "tags": ["tomatoes", "planting", "punjab"],
        "created_by": "Rajesh Kumar",
        "created_date": "2024-01-20T10:00:00Z",
        "likes_count": 5,
        "replies_count": 3,
        "is_resolved": False,
    },
    {
        "id": "2",
        "title": "Organic pest control for wheat",
        "content": (
            "Has anyone tried neem oil spray for wheat pest control? I want to avoid "
            "chemical pesticides and go organic. Share your experiences."
        ),
        "category": "tip",
        "location": "Haryana",
        "tags": ["wheat", "organic", "pest-control", "neem"],
        "created_by": "Priya Sharma",
        "created_date": "2024-01-18T15:30:00Z",
        "likes_count": 8,
        "replies_count": 2,
        "is_resolved": True,
    },
]

DETECTIONS = [
    {
        "id": "1",
        "image_url": "/images/sample-plant.jpg",
        "detected_disease": "Early Blight",
        "plant_type": "Tomato",
        "confidence_score": 85,
        "symptoms": ["Yellow spots on leaves", "Brown lesions", "Leaf wilting"],
        "treatment_recommendations": [
            "Remove affected leaves immediately",
            "Apply copper fungicide spray",
            "Improve air circulation around plants",
        ],
        "prevention_tips": [
            "Water plants at soil level, avoid wetting leaves",
            "Ensure proper spacing between plants",
            "Rotate crops annually",
        ],
        "severity": "moderate",
        "created_date": "2024-01-19T14:30:00Z",
    },
    {
        "id": "2",
        "image_url": "/images/sample-plant2.jpg",
        "detected_disease": "Rust",
        "plant_type": "Wheat",
        "confidence_score": 92,
        "symptoms": ["Orange-brown pustules on leaves", "Yellowing of foliage"],
        "treatment_recommendations": [
            "Apply sulfur-based fungicide",
            "Remove and burn infected plant debris",
        ],
        "prevention_tips": [
            "Plant rust-resistant varieties",
            "Avoid overhead irrigation",
            "Maintain proper crop rotation",
        ],
        "severity": "high",
        "created_date": "2024-01-17T09:15:00Z",
    },
]

TIPS = [
    {
        "id": "1",
        "title": "Organic Soil Preparation for Vegetables",
        "content": (
            "Mix 3 parts garden soil, 2 parts compost and 1 part sand. Add organic "
            "matter like leaf mold or well-rotted manure. Test soil pH and adjust to "
            "the 6.0-7.0 range."
        ),
        "category": "soil_management",
        "difficulty_level": "beginner",
        "estimated_cost": "low",
        "season": "all_seasons",
        "crop_types": ["tomatoes", "peppers", "lettuce", "spinach"],
        "image_url": "/images/soil-prep.jpg",
        "created_date": "2024-01-15T08:00:00Z",
    },
    {
        "id": "2",
        "title": "Natural Pest Control with Companion Planting",
        "content": (
            "Plant marigolds around tomatoes to repel nematodes, basil near peppers "
            "to deter aphids, and nasturtiums to attract beneficial insects."
        ),
        "category": "pest_control",
        "difficulty_level": "intermediate",
        "estimated_cost": "low",
        "season": "spring",
        "crop_types": ["tomatoes", "peppers", "cabbage", "broccoli"],
        "image_url": "/images/companion-planting.jpg",
        "created_date": "2024-01-12T14:20:00Z",
    },
    {
        "id": "3",
        "title": "Drip Irrigation System Setup",
        "content": (
            "Install a main line, connect emitters every 12-18 inches and use a "
            "timer for consistent watering. Water usage drops by 30-50%."
        ),
        "category": "irrigation",
        "difficulty_level": "intermediate",
        "estimated_cost": "medium",
        "season": "all_seasons",
        "crop_types": ["all"],
        "image_url": "/images/drip-irrigation.jpg",
        "created_date": "2024-01-10T11:45:00Z",
    },
    {
        "id": "4",
        "title": "Composting for Nutrient-Rich Soil",
        "content": (
            "Layer green materials with brown materials in a 1:3 ratio. Turn the "
            "pile weekly and keep it moist. Compost is ready in 2-3 months."
        ),
        "category": "fertilization",
        "difficulty_level": "beginner",
        "estimated_cost": "low",
        "season": "all_seasons",
        "crop_types": ["all"],
        "image_url": "/images/composting.jpg",
        "created_date": "2024-01-08T16:30:00Z",
    },
]

USERS = [
    {
        "id": "demo-farmer",
        "full_name": "Demo Farmer",
        "email": "farmer@demo.com",
        "phone": "+91 9876543210",
        "location": "Punjab, India",
        "preferred_language": "en",
        "created_date": "2024-01-01T00:00:00Z",
    },
]

ALL = {
    "crops": CROPS,
    "posts": POSTS,
    "detections": DETECTIONS,
    "tips": TIPS,
    "users": USERS,
}
