"""
Image Catalog Data for Post Insights

This module contains the lookup tables used to describe images from their URLs.
Extracted from settings.py to separate data from configuration logic.
"""

# =============================================================================
# Stock Photo Providers
# =============================================================================

PICSUM_HOST = "picsum.photos"
UNSPLASH_HOST = "unsplash"

# Lorem Picsum photo descriptions by ID (URL format: https://picsum.photos/id/<id>/<w>/<h>)
PICSUM_DESCRIPTIONS = {
    '1015': 'A stunning landscape showing a waterfall flowing down rocky mountains into a serene lake. There are green pine trees surrounding the scene and majestic mountains in the background with a clear blue sky.',
    '1082': 'A vintage wooden desk with musical instruments and equipment, including sheet music, a guitar, and audio production tools. The scene has a warm, artistic vibe with rich wood tones and creative energy.',
    '1084': 'A futuristic digital art piece with bright blue and purple neon glows against a dark background. The image has a sci-fi aesthetic with abstract technology-inspired patterns that evoke the feeling of artificial intelligence or advanced computing.',
    '10': 'A breathtaking mountain landscape with snow-capped peaks rising above lush green forests. There\'s a clear blue sky and the scene captures the majestic beauty of untouched nature.',
    '25': 'A beautifully plated pasta dish with fresh ingredients. The homemade pasta is served with a rich sauce, fresh herbs garnish, and grated cheese on top. The presentation is elegant and appetizing on a stylish plate.',
    '29': 'A busy urban street scene with a person wearing a blue t-shirt and sunglasses walking among the city buildings. The architecture features both modern and classic elements with various shops and businesses visible.',
    '237': 'An adorable black Labrador puppy sitting on a wooden floor and looking attentively at the camera. The dog has a shiny coat, expressive eyes, and a curious, friendly expression.',
    '42': 'A perfectly crafted coffee in a white ceramic cup with intricate latte art on the foam. The cup sits on a wooden table in what appears to be a cozy café setting with warm lighting.',
    '48': 'A modern fitness space with exercise equipment. There are weights, yoga mats, and training gear visible, suggesting an active lifestyle and workout routine. The space has good lighting and appears clean and well-organized.',
    '24': 'A cozy reading corner with bookshelves filled with books. There\'s a comfortable chair, good lighting, and a calm atmosphere perfect for reading and relaxation.',
}

PICSUM_GENERIC_TEMPLATE = (
    "A high-quality stock photo from Lorem Picsum with ID {photo_id}. The image likely contains "
    "landscapes, people, objects, or abstract concepts commonly found in photography libraries."
)

# =============================================================================
# URL Substring Patterns
# =============================================================================

# Checked in order against the full URL; first match wins
URL_PATTERN_DESCRIPTIONS = [
    ('photo-1583172556690', 'A beautiful sunset at the beach with orange and purple colors in the sky. The sun is setting over the ocean horizon, creating a golden reflection on the water. There are silhouettes of a few people walking along the shoreline.'),
    ('photo-1618588507085', 'A stunning mountain landscape with peaks covered in snow. There are green trees in the foreground and a clear blue sky. The scene shows a hiking trail winding through the landscape.'),
    ('photo-1476224203421', 'A plate of freshly made pasta with tomato sauce. The pasta appears to be homemade and is garnished with basil leaves and grated parmesan cheese. There\'s also a small bowl of olive oil visible in the corner of the image.'),
    ('photo-1602002418082', 'A young man walking on a city street wearing a bright blue t-shirt and dark sunglasses. He has short brown hair and appears to be walking confidently. The background shows urban architecture with buildings and some street signs.'),
    ('photo-1543466835', 'A golden retriever dog with light brown fur sitting in a park. The dog has a friendly expression and its tongue is slightly out. The background shows green grass and some trees, suggesting it\'s a nice day at a park or garden.'),
    ('photo-1495474472287', 'A white coffee cup containing a latte with artistic foam art on top. The cup is placed on a wooden table. There\'s also a small plate with what appears to be a pastry or cookie beside the cup. The setting looks like a cozy cafe.'),
    ('photo-1517836357463', 'A woman in blue workout clothes (blue leggings and a matching top) in what appears to be a home gym or exercise space. She seems to be in the middle of a workout routine, possibly yoga or strength training. There\'s exercise equipment visible in the background.'),
    ('photo-1512820790803', 'A person sitting in a comfortable chair reading a book. There\'s a bookshelf filled with books in the background. There\'s also a small table nearby with what appears to be a cup of tea or coffee. The setting has a cozy, relaxed atmosphere.'),
]

# =============================================================================
# Keyword Templates and Fallbacks
# =============================================================================

UNSPLASH_PHOTOS_PATH = "unsplash.com/photos/"
UNSPLASH_KEYWORD_TEMPLATE = (
    "An image from Unsplash, likely a high-quality stock photo. The image might be related to "
    "these concepts extracted from the URL: {keywords}"
)
GENERIC_KEYWORD_TEMPLATE = "An image that may be related to these concepts based on the URL: {keywords}"
GENERIC_IMAGE_DESCRIPTION = (
    "An image shared on social media. Without direct vision capabilities, I can only make "
    "limited inferences about the image content."
)
UNDETERMINED_IMAGE_DESCRIPTION = (
    "An image whose details cannot be determined without direct vision capabilities."
)

# =============================================================================
# Capability Report
# =============================================================================

SUPPORTED_FEATURES = [
    "Text chat",
    "Image analysis (simulated)",
    "Post content analysis",
]
