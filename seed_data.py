"""
Seed content

The fixed product catalog served by the mock API and the blog posts shown by
the storefront. Both are read only; callers copy records before handing them
out.
"""

DEFAULT_IMAGE = "https://images.pexels.com/photos/6373305/pexels-photo-6373305.jpeg?auto=compress&cs=tinysrgb&w=800"

CATEGORIES = ["figures", "posters", "keychains"]

PRODUCTS = [
    {
        "id": 1,
        "title": "Attack on Titan Eren Yeager Figure",
        "price": 89.99,
        "description": "High-quality PVC figure of Eren Yeager from Attack on Titan. Standing 25cm tall with incredible detail and articulation.",
        "image": DEFAULT_IMAGE,
        "category": "figures",
        "stock": 15,
        "tags": ["attack-on-titan", "eren", "figure", "anime"],
        "stars": 5,
    },
    {
        "id": 2,
        "title": "Demon Slayer Tanjiro Poster",
        "price": 24.99,
        "description": "Beautiful artwork poster featuring Tanjiro from Demon Slayer. Perfect for decorating your room or office.",
        "image": DEFAULT_IMAGE,
        "category": "posters",
        "stock": 50,
        "tags": ["demon-slayer", "tanjiro", "poster", "wall-art"],
        "stars": 5,
    },
    {
        "id": 3,
        "title": "Naruto Kunai Keychain",
        "price": 12.99,
        "description": "Metal kunai keychain replica from Naruto series. Perfect accessory for any Naruto fan.",
        "image": DEFAULT_IMAGE,
        "category": "keychains",
        "stock": 100,
        "tags": ["naruto", "kunai", "keychain", "metal"],
        "stars": 4,
    },
    {
        "id": 4,
        "title": "One Piece Luffy Figure",
        "price": 75.99,
        "description": "Premium figure of Monkey D. Luffy from One Piece in his Gear 4 form. Highly detailed and poseable.",
        "image": DEFAULT_IMAGE,
        "category": "figures",
        "stock": 20,
        "tags": ["one-piece", "luffy", "figure", "gear-4"],
        "stars": 5,
    },
    {
        "id": 5,
        "title": "My Hero Academia All Might Poster",
        "price": 19.99,
        "description": "Dynamic poster featuring All Might from My Hero Academia. High-quality print on premium paper.",
        "image": DEFAULT_IMAGE,
        "category": "posters",
        "stock": 75,
        "tags": ["my-hero-academia", "all-might", "poster", "hero"],
        "stars": 4,
    },
    {
        "id": 6,
        "title": "Dragon Ball Z Scouter Keychain",
        "price": 15.99,
        "description": "Replica scouter keychain from Dragon Ball Z. LED light functionality included.",
        "image": DEFAULT_IMAGE,
        "category": "keychains",
        "stock": 60,
        "tags": ["dragon-ball", "scouter", "keychain", "led"],
        "stars": 4,
    },
]

BLOG_CATEGORIES = ["Reviews", "Guides", "News", "Culture"]

_TOP_FIGURES_CONTENT = """
<p>The world of anime figure collecting has never been more exciting than it is in 2024. With incredible attention to detail, innovative manufacturing techniques, and beloved characters from both classic and contemporary series, this year's releases are truly spectacular.</p>
<h2>What Makes a Great Anime Figure?</h2>
<ul>
  <li>Exceptional attention to detail in sculpting and painting</li>
  <li>High-quality materials that ensure longevity</li>
  <li>Accurate representation of the character's design</li>
  <li>Stable construction and proper balance</li>
</ul>
<h2>Our Top Picks for 2024</h2>
<h3>1. Attack on Titan - Levi Ackerman (1/7 Scale)</h3>
<p>Levi in his iconic Survey Corps uniform, complete with ODM gear and dual blades.</p>
<h3>2. Demon Slayer - Tanjiro Kamado (1/8 Scale)</h3>
<p>Tanjiro mid-battle with translucent blue water breathing effects.</p>
<h3>3. Jujutsu Kaisen - Satoru Gojo (1/7 Scale)</h3>
<p>Comes with his signature blindfold and an optional unmasked head.</p>
<h2>Collecting Tips for Beginners</h2>
<ul>
  <li>Start with characters you truly love</li>
  <li>Research the manufacturer's reputation</li>
  <li>Consider your display space before purchasing</li>
</ul>
"""

BLOG_POSTS = [
    {
        "id": 1,
        "title": "Top 10 Must-Have Anime Figures of 2024",
        "excerpt": "Discover the most sought-after anime figures that collectors are raving about this year, from limited editions to stunning craftsmanship.",
        "content": _TOP_FIGURES_CONTENT,
        "author": "Sakura Tanaka",
        "published_at": "2024-01-15",
        "read_time": 8,
        "image": DEFAULT_IMAGE,
        "tags": ["figures", "collecting", "2024", "recommendations"],
        "category": "Reviews",
    },
    {
        "id": 2,
        "title": "The Art of Anime Poster Collection: A Beginner's Guide",
        "excerpt": "Learn how to start your anime poster collection, from choosing the right pieces to proper display and preservation techniques.",
        "content": "<p>Posters are the easiest way into collecting. Pick artwork you love, frame it away from direct sunlight and rotate your display with the seasons.</p>",
        "author": "Hiroshi Yamamoto",
        "published_at": "2024-01-12",
        "read_time": 6,
        "image": DEFAULT_IMAGE,
        "tags": ["posters", "collecting", "beginner", "display"],
        "category": "Guides",
    },
    {
        "id": 3,
        "title": "Upcoming Anime Releases to Watch in 2024",
        "excerpt": "Get ready for an exciting year of anime with our comprehensive preview of the most anticipated series and movies coming soon.",
        "content": "<p>From long-awaited sequels to bold new originals, this year's release calendar is packed. Here is what we are watching.</p>",
        "author": "Yuki Sato",
        "published_at": "2024-01-10",
        "read_time": 10,
        "image": DEFAULT_IMAGE,
        "tags": ["anime", "2024", "releases", "preview"],
        "category": "News",
    },
    {
        "id": 4,
        "title": "How to Care for Your Anime Collectibles",
        "excerpt": "Essential tips and tricks to keep your anime figures, posters, and other collectibles in pristine condition for years to come.",
        "content": "<p>Dust weekly with a soft brush, keep figures out of direct sunlight and store boxes flat in a dry place.</p>",
        "author": "Mei Chen",
        "published_at": "2024-01-08",
        "read_time": 7,
        "image": DEFAULT_IMAGE,
        "tags": ["care", "maintenance", "collectibles", "tips"],
        "category": "Guides",
    },
    {
        "id": 5,
        "title": "The Evolution of Anime Merchandise: Past to Present",
        "excerpt": "Take a journey through the history of anime merchandise and see how it has evolved from simple toys to sophisticated collectibles.",
        "content": "<p>Anime merchandise started with simple tin toys and stickers. Today it spans scale figures, apparel and limited-run art prints.</p>",
        "author": "Takeshi Nakamura",
        "published_at": "2024-01-05",
        "read_time": 12,
        "image": DEFAULT_IMAGE,
        "tags": ["history", "merchandise", "evolution", "culture"],
        "category": "Culture",
    },
    {
        "id": 6,
        "title": "Best Anime Keychains for Every Budget",
        "excerpt": "From affordable options to premium collectibles, find the perfect anime keychain that fits your style and budget.",
        "content": "<p>Acrylic charms cost little and look great on a bag. Metal replicas and LED keychains are worth the extra for display pieces.</p>",
        "author": "Rina Kobayashi",
        "published_at": "2024-01-03",
        "read_time": 5,
        "image": DEFAULT_IMAGE,
        "tags": ["keychains", "budget", "accessories", "recommendations"],
        "category": "Reviews",
    },
]
