"""Built-in sample posts and session-start preferences.

Used as the fallback candidate set when the posts API is unavailable.
"""

from typing import List, Optional

from ..models import Post, UserPreferences
from ..ranking.scorers import MS_PER_HOUR, now_ms

_SAMPLE_POSTS = [
    {
        "id": "1",
        "creator": {
            "id": "user_1",
            "username": "jane_fitness",
            "displayName": "Jane Smith",
            "avatarUrl": "https://images.pexels.com/photos/733872/pexels-photo-733872.jpeg?auto=compress&cs=tinysrgb&w=150",
            "isVerified": True,
            "followerCount": 125000,
            "engagementRate": 8.5,
            "category": ["fitness", "wellness", "motivation"],
            "trustScore": 9.2,
            "isFollowing": True,
        },
        "content": (
            "New workout video is live! 💪 Who's ready to sweat with me? This 30-minute HIIT "
            "session will challenge every muscle group. Perfect for beginners and advanced "
            "athletes alike! #FitnessMotivation #HIIT #Workout"
        ),
        "mediaUrl": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4",
        "mediaType": "video",
        "isPaid": False,
        "privacy": "public",
        "metrics": {
            "likesCount": 2340,
            "commentsCount": 180,
            "sharesCount": 95,
            "viewsCount": 15600,
            "engagementRate": 8.2,
            "viralityScore": 7.8,
            "freshnessScore": 9.5,
            "relevanceScore": 8.9,
        },
        "createdAt": "2h",
        "hoursAgo": 2,
        "tags": ["fitness", "workout", "motivation", "hiit"],
        "category": "fitness",
        "qualityScore": 9.1,
        "trendingScore": 8.7,
    },
    {
        "id": "2",
        "creator": {
            "id": "user_2",
            "username": "artist_maya",
            "displayName": "Maya Chen",
            "avatarUrl": "https://images.pexels.com/photos/1310522/pexels-photo-1310522.jpeg?auto=compress&cs=tinysrgb&w=150",
            "isVerified": False,
            "followerCount": 45000,
            "engagementRate": 12.3,
            "category": ["art", "creativity", "design"],
            "trustScore": 8.7,
            "isFollowing": False,
        },
        "content": (
            "Behind the scenes of my latest art piece 🎨✨ This took me 3 weeks to complete. "
            "The inspiration came from a dream I had about floating cities."
        ),
        "mediaUrl": "https://images.pexels.com/photos/1047540/pexels-photo-1047540.jpeg?auto=compress&cs=tinysrgb&w=800",
        "mediaType": "image",
        "isPaid": True,
        "price": 15,
        "privacy": "paid",
        "metrics": {
            "likesCount": 890,
            "commentsCount": 120,
            "sharesCount": 45,
            "viewsCount": 3200,
            "engagementRate": 12.1,
            "viralityScore": 6.2,
            "freshnessScore": 8.8,
            "relevanceScore": 7.5,
        },
        "createdAt": "4h",
        "hoursAgo": 4,
        "tags": ["art", "creativity", "behind-the-scenes", "digital-art"],
        "category": "art",
        "qualityScore": 8.9,
        "trendingScore": 7.2,
    },
    {
        "id": "3",
        "creator": {
            "id": "user_3",
            "username": "chef_marco",
            "displayName": "Marco Rodriguez",
            "avatarUrl": "https://images.pexels.com/photos/1040880/pexels-photo-1040880.jpeg?auto=compress&cs=tinysrgb&w=150",
            "isVerified": True,
            "followerCount": 89000,
            "engagementRate": 9.8,
            "category": ["cooking", "food", "recipes"],
            "trustScore": 9.5,
            "isFollowing": True,
        },
        "content": (
            "Exclusive recipe reveal! My signature pasta dish that took me 5 years to perfect 🍝 "
            "The secret is in the sauce technique. Subscribers get the full video tutorial!"
        ),
        "mediaUrl": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ElephantsDream.mp4",
        "mediaType": "video",
        "isPaid": True,
        "price": 25,
        "privacy": "followers",
        "metrics": {
            "likesCount": 1560,
            "commentsCount": 230,
            "sharesCount": 78,
            "viewsCount": 8900,
            "engagementRate": 9.6,
            "viralityScore": 8.1,
            "freshnessScore": 7.2,
            "relevanceScore": 9.3,
        },
        "createdAt": "6h",
        "hoursAgo": 6,
        "tags": ["cooking", "recipe", "pasta", "exclusive"],
        "category": "food",
        "isLiked": True,
        "qualityScore": 9.4,
        "trendingScore": 8.9,
    },
    {
        "id": "4",
        "creator": {
            "id": "user_4",
            "username": "tech_guru",
            "displayName": "Alex Kim",
            "avatarUrl": "https://images.pexels.com/photos/1040881/pexels-photo-1040881.jpeg?auto=compress&cs=tinysrgb&w=150",
            "isVerified": True,
            "followerCount": 200000,
            "engagementRate": 11.2,
            "category": ["technology", "programming", "ai"],
            "trustScore": 9.8,
            "isFollowing": False,
        },
        "content": (
            "Just built an AI that can generate code from natural language! 🤖 The future of "
            "programming is here. Check out this demo..."
        ),
        "mediaUrl": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4",
        "mediaType": "video",
        "isPaid": False,
        "privacy": "public",
        "metrics": {
            "likesCount": 3200,
            "commentsCount": 450,
            "sharesCount": 180,
            "viewsCount": 25000,
            "engagementRate": 11.0,
            "viralityScore": 9.2,
            "freshnessScore": 9.8,
            "relevanceScore": 9.7,
        },
        "createdAt": "1h",
        "hoursAgo": 1,
        "tags": ["ai", "programming", "technology", "innovation"],
        "category": "technology",
        "isBookmarked": True,
        "qualityScore": 9.6,
        "trendingScore": 9.5,
    },
    {
        "id": "5",
        "creator": {
            "id": "user_5",
            "username": "travel_jenny",
            "displayName": "Jenny Walsh",
            "avatarUrl": "https://images.pexels.com/photos/1040882/pexels-photo-1040882.jpeg?auto=compress&cs=tinysrgb&w=150",
            "isVerified": False,
            "followerCount": 67000,
            "engagementRate": 7.8,
            "category": ["travel", "photography", "adventure"],
            "trustScore": 8.9,
            "isFollowing": True,
        },
        "content": (
            "Sunset in Santorini 🌅 This view never gets old. Sometimes you have to travel "
            "halfway around the world to find yourself."
        ),
        "mediaUrl": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerEscapes.mp4",
        "mediaType": "video",
        "isPaid": False,
        "privacy": "public",
        "metrics": {
            "likesCount": 1200,
            "commentsCount": 89,
            "sharesCount": 34,
            "viewsCount": 5600,
            "engagementRate": 7.5,
            "viralityScore": 5.8,
            "freshnessScore": 8.5,
            "relevanceScore": 8.1,
        },
        "createdAt": "8h",
        "hoursAgo": 8,
        "tags": ["travel", "santorini", "sunset", "photography"],
        "category": "travel",
        "qualityScore": 8.7,
        "trendingScore": 6.9,
    },
]


def sample_posts(now: Optional[int] = None) -> List[Post]:
    """
    Build the sample candidate set.

    Args:
        now: Reference time in epoch milliseconds; post ages are relative to it

    Returns:
        Five posts from five creators, newest one hour old
    """
    if now is None:
        now = now_ms()

    posts = []
    for raw in _SAMPLE_POSTS:
        data = {k: v for k, v in raw.items() if k != "hoursAgo"}
        data["createdAtTimestamp"] = now - raw["hoursAgo"] * MS_PER_HOUR
        posts.append(Post.model_validate(data))
    return posts


def default_preferences() -> UserPreferences:
    """Preferences a new viewer session starts with."""
    return UserPreferences.model_validate(
        {
            "interests": ["fitness", "technology", "art", "cooking", "travel"],
            "preferredCategories": ["fitness", "technology", "food"],
            "engagementHistory": {
                "likedPosts": ["3"],
                "commentedPosts": [],
                "sharedPosts": [],
                "viewedPosts": [],
                "bookmarkedPosts": ["4"],
            },
            "timeSpentOnPosts": {},
            "followingList": ["user_1", "user_3", "user_5"],
            "blockedUsers": [],
            "preferredContentTypes": ["video", "image"],
            "preferredPostLength": "medium",
            "activityPattern": {
                "peakHours": [9, 12, 18, 21],
                "averageSessionLength": 15,
                "preferredDays": ["monday", "tuesday", "wednesday", "thursday", "friday"],
            },
        }
    )
