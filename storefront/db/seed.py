import logging

from storefront.core.security import hash_password
from storefront.db.storage import Storage

logger = logging.getLogger(__name__)

IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=600&q=80"

SAMPLE_USERS = [
    {"username": "admin", "password": "password123", "email": "admin@fashionhub.com",
     "first_name": "Admin", "last_name": "User", "is_admin": True},
    {"username": "user", "password": "password123", "email": "user@example.com",
     "first_name": "Regular", "last_name": "User", "is_admin": False},
]

SAMPLE_PRODUCTS = [
    # womens
    {"name": "Casual Summer Dress", "price": 49.99, "category": "womens", "sub_category": "dresses",
     "description": "A versatile and comfortable summer dress made with lightweight, breathable fabric.",
     "image_urls": [IMG.format("1521572163474-6864f9cf17ab")], "sizes": ["XS", "S", "M", "L", "XL"],
     "colors": ["Blue", "Red", "Green", "Yellow"], "material": "100% Cotton", "is_new": True, "is_featured": True},
    {"name": "Floral Maxi Dress", "price": 79.99, "category": "womens", "sub_category": "dresses",
     "description": "Elegant floral print maxi dress with adjustable straps.",
     "image_urls": [IMG.format("1572804013309-59a88b7e92f1")], "sizes": ["XS", "S", "M", "L", "XL"],
     "colors": ["Blue", "Pink", "White"], "material": "Polyester Blend", "is_new": True},
    {"name": "Silk Blouse", "price": 59.99, "category": "womens", "sub_category": "tops",
     "description": "Elegant silk blouse with a relaxed fit for professional and casual settings.",
     "image_urls": [IMG.format("1594223274512-ad4803739b7c")], "sizes": ["S", "M", "L"],
     "colors": ["White", "Black", "Navy"], "material": "100% Silk", "is_new": True},
    {"name": "Striped Cotton Top", "price": 34.99, "sale_price": 29.99, "category": "womens", "sub_category": "tops",
     "description": "Casual striped cotton top with short sleeves.",
     "image_urls": [IMG.format("1503185912284-5271ff81b9a8")], "sizes": ["XS", "S", "M", "L", "XL"],
     "colors": ["Blue/White", "Black/White", "Red/White"], "material": "100% Cotton"},
    {"name": "High-Waisted Skinny Jeans", "price": 69.99, "category": "womens", "sub_category": "jeans",
     "description": "Flattering high-waisted skinny jeans with a bit of stretch.",
     "image_urls": [IMG.format("1541099649105-f69ad21f3246")], "sizes": ["24", "25", "26", "27", "28", "29", "30"],
     "colors": ["Dark Blue", "Black", "Light Blue"], "material": "98% Cotton, 2% Elastane", "is_featured": True},
    # mens
    {"name": "Classic Denim Jacket", "price": 89.99, "category": "mens", "sub_category": "shirts",
     "description": "A timeless denim jacket, perfect for layering in any season.",
     "image_urls": [IMG.format("1584273143981-41c073dfe8f8")], "sizes": ["S", "M", "L", "XL"],
     "colors": ["Blue", "Black"], "material": "Denim", "is_featured": True},
    {"name": "Oxford Button-Down Shirt", "price": 59.99, "category": "mens", "sub_category": "shirts",
     "description": "Classic oxford button-down shirt made with premium cotton.",
     "image_urls": [IMG.format("1598033129183-c4f50c736f10")], "sizes": ["S", "M", "L", "XL", "XXL"],
     "colors": ["White", "Blue", "Pink", "Gray"], "material": "100% Cotton"},
    {"name": "Graphic Print T-Shirt", "price": 29.99, "category": "mens", "sub_category": "t-shirts",
     "description": "Comfortable cotton t-shirt featuring a unique graphic design.",
     "image_urls": [IMG.format("1576566588028-4147f3842f27")], "sizes": ["S", "M", "L", "XL", "XXL"],
     "colors": ["White", "Black", "Gray"], "material": "100% Cotton", "is_new": True},
    {"name": "Premium Cotton T-Shirt", "price": 24.99, "sale_price": 19.99, "category": "mens", "sub_category": "t-shirts",
     "description": "Essential crew neck t-shirt made from premium cotton.",
     "image_urls": [IMG.format("1521572163474-6864f9cf17ab")], "sizes": ["S", "M", "L", "XL", "XXL"],
     "colors": ["White", "Black", "Navy", "Gray", "Green"], "material": "100% Organic Cotton"},
    {"name": "Slim Fit Chino Pants", "price": 59.99, "category": "mens", "sub_category": "jeans",
     "description": "Versatile slim fit chino pants that go from work to weekend.",
     "image_urls": [IMG.format("1517445312882-bc9910d042b3")], "sizes": ["28", "30", "32", "34", "36", "38"],
     "colors": ["Khaki", "Navy", "Black", "Olive"], "material": "98% Cotton, 2% Elastane"},
    {"name": "Classic Straight Jeans", "price": 69.99, "category": "mens", "sub_category": "jeans",
     "description": "Timeless straight-leg jeans made from high-quality denim.",
     "image_urls": [IMG.format("1555689502-c4b22d76c56f")], "sizes": ["28", "30", "32", "34", "36", "38", "40"],
     "colors": ["Dark Blue", "Medium Blue", "Black"], "material": "100% Cotton Denim", "is_featured": True},
    # shoes
    {"name": "Leather Ankle Boots", "price": 129.99, "sale_price": 99.99, "category": "shoes", "sub_category": "boots",
     "description": "Stylish and comfortable ankle boots made with genuine leather.",
     "image_urls": [IMG.format("1527719327859-c6ce80353573")], "sizes": ["36", "37", "38", "39", "40", "41"],
     "colors": ["Black", "Brown"], "material": "Leather", "is_featured": True},
    {"name": "Canvas Sneakers", "price": 49.99, "category": "shoes", "sub_category": "sneakers",
     "description": "Classic canvas sneakers with rubber soles.",
     "image_urls": [IMG.format("1603808033192-082d6919d3e1")], "sizes": ["36", "37", "38", "39", "40", "41", "42"],
     "colors": ["White", "Black", "Navy", "Red"], "material": "Canvas and Rubber", "is_new": True},
    {"name": "Athletic Running Shoes", "price": 89.99, "category": "shoes", "sub_category": "sneakers",
     "description": "Performance running shoes with responsive cushioning and breathable mesh upper.",
     "image_urls": [IMG.format("1542291026-7eec264c27ff")], "sizes": ["38", "39", "40", "41", "42", "43", "44"],
     "colors": ["Black/White", "Blue/Gray", "All Black"], "material": "Synthetic and Mesh",
     "is_new": True, "is_featured": True},
    {"name": "Strappy Heeled Sandals", "price": 79.99, "sale_price": 59.99, "category": "shoes", "sub_category": "sandals",
     "description": "Elegant strappy sandals with a comfortable mid-heel.",
     "image_urls": [IMG.format("1543163521-1bf539c55dd2")], "sizes": ["35", "36", "37", "38", "39", "40", "41"],
     "colors": ["Black", "Nude", "Silver", "Gold"], "material": "Synthetic Leather"},
    # accessories
    {"name": "Cashmere Scarf", "price": 39.99, "category": "accessories", "sub_category": "scarves",
     "description": "Luxurious cashmere scarf for the colder months.",
     "image_urls": [IMG.format("1509946458702-4378df1e2560")], "colors": ["Gray", "Navy", "Burgundy"],
     "material": "Cashmere", "is_featured": True},
    {"name": "Leather Tote Bag", "price": 119.99, "category": "accessories", "sub_category": "bags",
     "description": "Spacious leather tote bag with internal pockets.",
     "image_urls": [IMG.format("1548863227-3af567fc3b27")], "colors": ["Black", "Brown", "Tan"],
     "material": "Genuine Leather", "is_new": True, "is_featured": True},
    {"name": "Minimalist Watch", "price": 99.99, "category": "accessories", "sub_category": "jewelry",
     "description": "Elegant minimalist watch with a premium leather strap.",
     "image_urls": [IMG.format("1524805444758-089113d48a6d")], "colors": ["Black/Silver", "Brown/Gold", "Black/Gold"],
     "material": "Stainless Steel, Leather"},
    {"name": "Wide Brim Straw Hat", "price": 34.99, "category": "accessories", "sub_category": "hats",
     "description": "Classic wide brim straw hat for sun protection with a touch of style.",
     "image_urls": [IMG.format("1565339119810-a536680fd7e1")], "colors": ["Natural", "Black", "White"],
     "material": "Straw", "is_new": True},
]

SAMPLE_REVIEWS = [
    {"product_id": 1, "user_id": 2, "rating": 5,
     "comment": "I absolutely love this dress! The fabric feels premium and the fit is perfect."},
    {"product_id": 6, "user_id": 2, "rating": 4,
     "comment": "Great jacket, fits well and looks good with almost everything."},
]


def seed_sample_data(storage: Storage):
    for user in SAMPLE_USERS:
        storage.create_user(dict(user, password=hash_password(user["password"])))
    for product in SAMPLE_PRODUCTS:
        storage.create_product(product)
    for review in SAMPLE_REVIEWS:
        storage.create_review(review)
    logger.info(
        "Seeded %d users, %d products, %d reviews",
        len(SAMPLE_USERS), len(SAMPLE_PRODUCTS), len(SAMPLE_REVIEWS),
    )
