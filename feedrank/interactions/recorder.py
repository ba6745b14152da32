"""Immutable updates of viewer history and post state after an interaction."""

from typing import Optional

from ..models import Post, UserPreferences
from .models import HISTORY_FIELDS, InteractionType


def record_interaction(
    prefs: UserPreferences,
    post_id: str,
    action: InteractionType,
    active: bool = True,
    seconds: Optional[float] = None,
) -> UserPreferences:
    """
    Record an interaction in the viewer's engagement history.

    Args:
        prefs: Current preferences (left untouched)
        post_id: Post the viewer acted on
        action: Interaction kind
        active: Add the post ID when True, remove it when False (un-like, un-bookmark)
        seconds: Time spent on the post, accumulated for views

    Returns:
        Updated preferences
    """
    action = InteractionType(action)
    field = HISTORY_FIELDS[action]

    ids = list(getattr(prefs.engagement_history, field))
    if active:
        if post_id not in ids:
            ids.append(post_id)
    else:
        ids = [i for i in ids if i != post_id]

    update = {"engagement_history": prefs.engagement_history.model_copy(update={field: ids})}

    if action == InteractionType.VIEW and active and seconds:
        time_spent = dict(prefs.time_spent_on_posts)
        time_spent[post_id] = time_spent.get(post_id, 0.0) + seconds
        update["time_spent_on_posts"] = time_spent

    return prefs.model_copy(update=update)


def _step(value: int, active: bool) -> int:
    return value + 1 if active else max(0, value - 1)


def apply_interaction(
    post: Post,
    action: InteractionType,
    active: bool = True,
    count: Optional[int] = None,
) -> Post:
    """
    Apply an interaction to a post's viewer flags and counters.

    Args:
        post: Current post (left untouched)
        action: Interaction kind
        active: Whether the action is applied or reversed
        count: Authoritative counter reported by the server, if any

    Returns:
        Updated post
    """
    action = InteractionType(action)
    metrics = post.metrics
    update = {}
    metric_update = {}

    if action == InteractionType.LIKE:
        update["is_liked"] = active
        if count is not None:
            metric_update["likes_count"] = count
        elif post.is_liked != active:
            metric_update["likes_count"] = _step(metrics.likes_count, active)
    elif action == InteractionType.BOOKMARK:
        update["is_bookmarked"] = active
    elif action == InteractionType.VIEW:
        if active:
            update["is_viewed"] = True
            metric_update["views_count"] = count if count is not None else metrics.views_count + 1
    elif action == InteractionType.SHARE:
        metric_update["shares_count"] = _step(metrics.shares_count, active)
    elif action == InteractionType.COMMENT:
        metric_update["comments_count"] = _step(metrics.comments_count, active)

    if metric_update:
        update["metrics"] = metrics.model_copy(update=metric_update)

    return post.model_copy(update=update)
