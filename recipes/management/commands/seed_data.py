user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

cuisines = [
    "Italian", "French", "Mexican", "Indian", "Thai", "Japanese", "Chinese",
    "Greek", "Spanish", "British", "American", "Lebanese", "Korean",
]

tags_pool = [
    "vegetarian", "vegan", "gluten-free", "quick", "comfort", "spicy",
    "healthy", "family", "budget", "one-pot", "baking", "summer", "winter",
]

ingredient_pool = [
    ("flour", "g"), ("sugar", "g"), ("butter", "g"), ("eggs", ""), ("milk", "ml"),
    ("olive oil", "tbsp"), ("garlic", "cloves"), ("onion", ""), ("tomatoes", ""),
    ("chicken breast", "g"), ("rice", "g"), ("pasta", "g"), ("salt", "tsp"),
    ("black pepper", "tsp"), ("lemon", ""), ("parsley", "handful"), ("cheddar", "g"),
    ("chickpeas", "can"), ("coconut milk", "ml"), ("ginger", "cm"),
]

step_verbs = [
    "Preheat", "Chop", "Stir", "Whisk", "Fold", "Simmer", "Roast", "Season",
    "Drain", "Serve",
]

review_phrases = [
    "Lovely recipe, will make again.",
    "Needed a little more salt but great otherwise.",
    "My family loved it!",
    "Took longer than stated, still tasty.",
    "Simple and delicious.",
    "",
]
