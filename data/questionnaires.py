from __future__ import annotations

from config import ChildPersonality as P, ParentingStyle as S


def _styles(authoritative, authoritarian, permissive, neglectful, helicopter, free_range):
    return {
        S.AUTHORITATIVE: authoritative,
        S.AUTHORITARIAN: authoritarian,
        S.PERMISSIVE: permissive,
        S.NEGLECTFUL: neglectful,
        S.HELICOPTER: helicopter,
        S.FREE_RANGE: free_range,
    }


def _traits(**points):
    return {P[name.upper()]: value for name, value in points.items()}


PARENTING_STYLE_QUESTIONS = [
    {
        "id": "1",
        "question": "وقتی فرزندتان کار اشتباهی انجام می‌دهد، معمولاً چه واکنشی نشان می‌دهید؟",
        "options": [
            {"value": "explain", "text": "توضیح می‌دهم چرا اشتباه است و عواقب آن را بیان می‌کنم",
             "styles": _styles(3, 1, 2, 0, 2, 1)},
            {"value": "punish", "text": "فوراً تنبیه می‌کنم تا یاد بگیرد",
             "styles": _styles(0, 3, 0, 1, 1, 0)},
            {"value": "ignore", "text": "نادیده می‌گیرم، خودش یاد می‌گیرد",
             "styles": _styles(0, 0, 2, 3, 0, 2)},
        ],
    },
    {
        "id": "2",
        "question": "در مورد قوانین خانه چه نظری دارید؟",
        "options": [
            {"value": "flexible", "text": "قوانین انعطاف‌پذیر با توضیح منطق آن‌ها",
             "styles": _styles(3, 1, 2, 0, 2, 2)},
            {"value": "strict", "text": "قوانین سختگیرانه که باید رعایت شوند",
             "styles": _styles(1, 3, 0, 0, 2, 0)},
            {"value": "few", "text": "قوانین کمی داریم، بیشتر آزاد است",
             "styles": _styles(0, 0, 3, 2, 0, 3)},
        ],
    },
    {
        "id": "3",
        "question": "چقدر در فعالیت‌های فرزندتان دخالت می‌کنید؟",
        "options": [
            {"value": "guide", "text": "راهنمایی می‌کنم اما اجازه تصمیم‌گیری می‌دهم",
             "styles": _styles(3, 2, 1, 0, 1, 2)},
            {"value": "control", "text": "تمام تصمیمات را من می‌گیرم",
             "styles": _styles(0, 3, 0, 0, 3, 0)},
            {"value": "hands_off", "text": "کمتر دخالت می‌کنم، خودش تجربه کند",
             "styles": _styles(1, 0, 2, 3, 0, 3)},
        ],
    },
]

PERSONALITY_QUESTIONS = [
    {
        "id": "1",
        "question": "فرزندتان در جمع چگونه رفتار می‌کند؟",
        "options": [
            {"value": "social", "text": "با اشتیاق با دیگران تعامل می‌کند",
             "traits": _traits(extrovert=3, introvert=0, sensitive=1, adventurous=2, analytical=1,
                               creative=1, leader=2, team_player=3, independent=1, dependent=0)},
            {"value": "quiet", "text": "ترجیح می‌دهد در گوشه‌ای آرام بازی کند",
             "traits": _traits(extrovert=0, introvert=3, sensitive=2, adventurous=0, analytical=2,
                               creative=2, leader=0, team_player=1, independent=2, dependent=1)},
            {"value": "selective", "text": "فقط با افراد خاصی راحت است",
             "traits": _traits(extrovert=1, introvert=2, sensitive=3, adventurous=0, analytical=2,
                               creative=1, leader=1, team_player=1, independent=1, dependent=2)},
        ],
    },
    {
        "id": "2",
        "question": "وقتی با مشکل جدیدی مواجه می‌شود چه می‌کند؟",
        "options": [
            {"value": "analyze", "text": "مشکل را بررسی و تحلیل می‌کند",
             "traits": _traits(extrovert=1, introvert=2, sensitive=1, adventurous=1, analytical=3,
                               creative=2, leader=2, team_player=1, independent=2, dependent=0)},
            {"value": "creative", "text": "راه‌حل‌های خلاقانه پیدا می‌کند",
             "traits": _traits(extrovert=2, introvert=2, sensitive=1, adventurous=2, analytical=1,
                               creative=3, leader=2, team_player=1, independent=2, dependent=1)},
            {"value": "ask_help", "text": "از دیگران کمک می‌خواهد",
             "traits": _traits(extrovert=2, introvert=1, sensitive=2, adventurous=0, analytical=1,
                               creative=1, leader=0, team_player=2, independent=0, dependent=3)},
        ],
    },
]
