"""Built-in UI string catalogs keyed by language code."""

EN = {
    # Layout
    "dashboard": "Dashboard",
    "diseaseDetection": "Disease Detection",
    "myCrops": "My Crops",
    "expertTips": "Expert Tips",
    "weather": "Weather",
    "community": "Community",
    "chatAssistant": "Chat Assistant",
    "yourFarmingAssistant": "Your Farming Assistant",
    "empoweringFarmers": "Empowering farmers with smart agricultural solutions",
    "footerRights": "© 2024 Krishi Shakhi. Built for sustainable farming.",
    # Dashboard
    "greetingMorning": "Good morning",
    "greetingAfternoon": "Good afternoon",
    "greetingEvening": "Good evening",
    "farmer": "Farmer",
    "dashboardSubtitle": "Here's what's happening with your crops today",
    "detectDisease": "Detect Disease",
    "scanPlantForDiseases": "Scan plant for diseases",
    "addCrop": "Add Crop",
    "registerNewCrop": "Register new crop",
    "getTips": "Get Tips",
    "expertFarmingAdvice": "Expert farming advice",
    "checkWeather": "Check Weather",
    "weatherForecast": "Weather forecast",
    "todaysWeather": "Today's Weather",
    "humidity": "Humidity",
    "farmingTip": "Farming Tip",
    "activeCrops": "Active Crops",
    "viewAll": "View All",
    "acres": "acres",
    "planted": "Planted",
    "noActiveCropsYet": "No active crops yet. Add one to get started!",
    "recentDetections": "Recent Detections",
    "severity": "severity",
    "noRecentDetections": "No diseases detected recently. Good job!",
    "featuredTips": "Featured Tips",
    "moreTips": "More Tips",
    "noTipsAvailable": "No expert tips available at the moment.",
    # Chat
    "chatWelcome": "Hello! I am your Krishi Shakhi assistant. How can I help you today?",
    "typeYourMessage": "Type your message here...",
    "sendMessage": "Send",
}

HI = {
    # Layout
    "dashboard": "डैशबोर्ड",
    "diseaseDetection": "रोग पहचान",
    "myCrops": "मेरी फसलें",
    "expertTips": "विशेषज्ञ सुझाव",
    "weather": "मौसम",
    "community": "समुदाय",
    "chatAssistant": "सहायक से चैट करें",
    "yourFarmingAssistant": "आपका कृषि सहायक",
    "empoweringFarmers": "स्मार्ट कृषि समाधानों के साथ किसानों को सशक्त बनाना",
    "footerRights": "© 2024 कृषि सखी। सतत खेती के लिए बनाया गया।",
    # Dashboard
    "greetingMorning": "सुप्रभात",
    "greetingAfternoon": "शुभ दोपहर",
    "greetingEvening": "शुभ संध्या",
    "farmer": "किसान",
    "dashboardSubtitle": "आज आपकी फसलों का हालचाल",
    "detectDisease": "रोग पहचानें",
    "scanPlantForDiseases": "पौधों के रोगों के लिए स्कैन करें",
    "addCrop": "फसल जोड़ें",
    "registerNewCrop": "नई फसल दर्ज करें",
    "getTips": "सुझाव प्राप्त करें",
    "expertFarmingAdvice": "विशेषज्ञ कृषि सलाह",
    "checkWeather": "मौसम जांचें",
    "weatherForecast": "मौसम पूर्वानुमान",
    "todaysWeather": "आज का मौसम",
    "humidity": "नमी",
    "farmingTip": "खेती युक्ति",
    "activeCrops": "सक्रिय फसलें",
    "viewAll": "सभी देखें",
    "acres": "एकड़",
    "planted": "लगाया गया",
    "noActiveCropsYet": "अभी तक कोई सक्रिय फसल नहीं है। आरंभ करने के लिए एक जोड़ें!",
    "recentDetections": "हाल की पहचान",
    "severity": "गंभीरता",
    "noRecentDetections": "हाल ही में कोई रोग नहीं पाया गया। बहुत बढ़िया!",
    "featuredTips": "विशेष सुझाव",
    "moreTips": "और सुझाव",
    "noTipsAvailable": "फिलहाल कोई विशेषज्ञ सुझाव उपलब्ध नहीं है।",
    # Chat
    "chatWelcome": "नमस्ते! मैं आपकी कृषि सखी सहायक हूँ। मैं आज आपकी कैसे मदद कर सकती हूँ?",
    "typeYourMessage": "अपना संदेश यहां टाइप करें...",
    "sendMessage": "भेजें",
}

CATALOGS = {"en": EN, "hi": HI}
