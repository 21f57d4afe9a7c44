"""
Mock Post Data for Post Insights

This module holds the in-memory canonical post collection served to the
feed, search and profile views. There is no persistence layer behind it.
"""

from typing import List

from data.models import Post

_RAW_POSTS = [
    {
        'id': '1',
        'username': 'travel_enthusiast',
        'userAvatar': 'https://picsum.photos/id/64/100/100',
        'imageUrl': 'https://picsum.photos/id/1015/800/800',
        'caption': 'Chasing waterfalls in the mountains today #travel #nature #adventure',
        'likes': 1243,
        'timestamp': '2h ago',
        'comments': [
            {'id': '101', 'username': 'wanderlust_jen', 'text': 'This view is unreal!', 'timestamp': '1h ago'},
            {'id': '102', 'username': 'hiker_mike', 'text': 'Which trail is this? Adding it to my list', 'timestamp': '45m ago'},
            {'id': '103', 'username': 'skeptic_sam', 'text': 'Looks heavily edited to me', 'timestamp': '30m ago'},
        ],
    },
    {
        'id': '2',
        'username': 'dog_lover',
        'userAvatar': 'https://picsum.photos/id/91/100/100',
        'imageUrl': 'https://picsum.photos/id/237/800/800',
        'caption': 'Meet Max, the newest member of our family #puppy #labrador #doglife',
        'likes': 3521,
        'timestamp': '4h ago',
        'comments': [
            {'id': '201', 'username': 'pet_photos', 'text': 'Those eyes! So adorable', 'timestamp': '3h ago'},
            {'id': '202', 'username': 'vet_clinic', 'text': 'Remember his first vaccinations!', 'timestamp': '2h ago'},
        ],
    },
    {
        'id': '3',
        'username': 'home_chef',
        'userAvatar': 'https://picsum.photos/id/177/100/100',
        'imageUrl': 'https://picsum.photos/id/25/800/800',
        'caption': 'Homemade pasta night with fresh basil from the garden #food #pasta #homecooking',
        'likes': 892,
        'timestamp': '6h ago',
        'comments': [
            {'id': '301', 'username': 'foodie_fran', 'text': 'Recipe please!', 'timestamp': '5h ago'},
            {'id': '302', 'username': 'nonna_rosa', 'text': 'Needs more cheese', 'timestamp': '4h ago'},
        ],
    },
    {
        'id': '4',
        'username': 'coffee_addict',
        'userAvatar': 'https://picsum.photos/id/338/100/100',
        'imageUrl': 'https://picsum.photos/id/42/800/800',
        'caption': 'Morning latte art at my favorite spot #coffee #latteart #morningvibes',
        'likes': 654,
        'timestamp': '8h ago',
        'comments': [
            {'id': '401', 'username': 'barista_ben', 'text': 'Nice rosetta!', 'timestamp': '7h ago'},
        ],
    },
    {
        'id': '5',
        'username': 'fit_life',
        'userAvatar': 'https://picsum.photos/id/342/100/100',
        'imageUrl': 'https://picsum.photos/id/48/800/800',
        'caption': 'New home gym setup is finally complete #fitness #workout #homegym',
        'likes': 1108,
        'timestamp': '1d ago',
        'comments': [
            {'id': '501', 'username': 'gym_rat', 'text': 'Goals! What weights are those?', 'timestamp': '20h ago'},
            {'id': '502', 'username': 'yoga_yasmin', 'text': 'Love the yoga corner', 'timestamp': '18h ago'},
        ],
    },
    {
        'id': '6',
        'username': 'book_worm',
        'userAvatar': 'https://picsum.photos/id/399/100/100',
        'imageUrl': 'https://picsum.photos/id/24/800/800',
        'caption': 'Rainy afternoon in my reading nook #books #reading #cozy',
        'likes': 777,
        'timestamp': '2d ago',
        'comments': [
            {'id': '601', 'username': 'library_lou', 'text': 'What are you reading?', 'timestamp': '1d ago'},
        ],
    },
]

MOCK_POSTS: List[Post] = [Post.from_dict(raw) for raw in _RAW_POSTS]


def get_posts() -> List[Post]:
    """Return a shallow copy of the canonical post collection."""
    return list(MOCK_POSTS)
