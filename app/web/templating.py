"""Jinja2 environment, UI translations and page rendering helpers."""

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.config import BASE_DIR
from app.dependencies import SUPPORTED_LOCALES, resolve_locale

templates = Jinja2Templates(directory=str(BASE_DIR / "app" / "templates"))

# UI strings; entity texts come bilingual from the data files.
TRANSLATIONS: dict[str, dict[str, str]] = {
    "zh-TW": {
        "site_name": "動物園導覽",
        "nav_label": "主選單",
        "nav_home": "首頁",
        "nav_animals": "動物圖鑑",
        "nav_search": "搜尋",
        "nav_map": "園區地圖",
        "nav_routes": "參觀路線",
        "nav_quiz": "知識測驗",
        "nav_favorites": "我的收藏",
        "nav_about": "關於我們",
        "language": "語言",
        "search_placeholder": "搜尋動物名稱...",
        "search_button": "搜尋",
        "featured_title": "保育明星",
        "zones_title": "園區分區",
        "animals_title": "動物圖鑑",
        "animal_count": "隻動物",
        "classification": "分類",
        "habitat": "棲息地",
        "diet": "食性",
        "activity": "活動時間",
        "zone": "所在區域",
        "size": "體型",
        "appearance": "外觀",
        "behavior": "行為",
        "fun_facts": "趣味小知識",
        "conservation_status": "保育等級",
        "related_animals": "相關動物",
        "previous_animal": "上一隻",
        "next_animal": "下一隻",
        "add_favorite": "加入收藏",
        "remove_favorite": "移除收藏",
        "play_sound": "播放叫聲",
        "search_title": "搜尋結果",
        "search_results_count": "筆結果",
        "no_results": "找不到符合的動物",
        "all": "全部",
        "filter": "篩選",
        "map_title": "互動地圖",
        "map_zoom_in": "放大",
        "map_zoom_out": "縮小",
        "map_reset": "重設",
        "routes_title": "參觀路線",
        "route_minutes": "分鐘",
        "route_planner_title": "自訂路線",
        "route_plan_button": "規劃路線",
        "route_share": "分享路線",
        "recent_history": "最近瀏覽",
        "clear_history": "清除紀錄",
        "quiz_title": "知識測驗",
        "quiz_total": "道題目",
        "quiz_start": "開始測驗",
        "quiz_by_animal": "依動物挑戰",
        "quiz_submit": "送出答案",
        "quiz_next": "下一題",
        "quiz_true": "是",
        "quiz_false": "否",
        "favorites_title": "我的收藏",
        "favorites_empty": "尚未收藏任何動物",
        "about_title": "關於我們",
        "about_body": "這是一個介紹園區動物、分區與參觀路線的導覽網站。所有資料僅供教育用途。",
        "error_title": "發生錯誤",
        "not_found": "找不到您要的頁面",
        "back_home": "回到首頁",
    },
    "en": {
        "site_name": "Zoo Guide",
        "nav_label": "Main navigation",
        "nav_home": "Home",
        "nav_animals": "Animals",
        "nav_search": "Search",
        "nav_map": "Map",
        "nav_routes": "Routes",
        "nav_quiz": "Quiz",
        "nav_favorites": "Favorites",
        "nav_about": "About",
        "language": "Language",
        "search_placeholder": "Search animals...",
        "search_button": "Search",
        "featured_title": "Conservation stars",
        "zones_title": "Zones",
        "animals_title": "Animal catalog",
        "animal_count": "animals",
        "classification": "Class",
        "habitat": "Habitat",
        "diet": "Diet",
        "activity": "Activity",
        "zone": "Zone",
        "size": "Size",
        "appearance": "Appearance",
        "behavior": "Behavior",
        "fun_facts": "Fun facts",
        "conservation_status": "Conservation status",
        "related_animals": "Related animals",
        "previous_animal": "Previous",
        "next_animal": "Next",
        "add_favorite": "Add to favorites",
        "remove_favorite": "Remove from favorites",
        "play_sound": "Play sound",
        "search_title": "Search results",
        "search_results_count": "results",
        "no_results": "No matching animals",
        "all": "All",
        "filter": "Filter",
        "map_title": "Interactive map",
        "map_zoom_in": "Zoom in",
        "map_zoom_out": "Zoom out",
        "map_reset": "Reset",
        "routes_title": "Tour routes",
        "route_minutes": "min",
        "route_planner_title": "Plan your own route",
        "route_plan_button": "Plan route",
        "route_share": "Share route",
        "recent_history": "Recently viewed",
        "clear_history": "Clear history",
        "quiz_title": "Quiz",
        "quiz_total": "questions",
        "quiz_start": "Start quiz",
        "quiz_by_animal": "Quiz by animal",
        "quiz_submit": "Submit",
        "quiz_next": "Next question",
        "quiz_true": "True",
        "quiz_false": "False",
        "favorites_title": "My favorites",
        "favorites_empty": "No favorite animals yet",
        "about_title": "About",
        "about_body": "A guide to the animals, zones and tour routes of the park. All content is for educational use.",
        "error_title": "Something went wrong",
        "not_found": "The page you requested could not be found",
        "back_home": "Back to home",
    },
}

CONSERVATION_LABELS = {
    "zh-TW": {
        "LC": "無危", "NT": "近危", "VU": "易危", "EN": "瀕危",
        "CR": "極危", "EW": "野外滅絕", "EX": "滅絕",
    },
    "en": {
        "LC": "Least Concern", "NT": "Near Threatened", "VU": "Vulnerable", "EN": "Endangered",
        "CR": "Critically Endangered", "EW": "Extinct in the Wild", "EX": "Extinct",
    },
}


def render(request: Request, name: str, context: dict | None = None, status_code: int = 200) -> HTMLResponse:
    """Render a page template with the locale helpers every layout needs."""
    locale = resolve_locale(request)
    strings = TRANSLATIONS[locale]
    ctx = {
        "locale": locale,
        "is_zh": locale == "zh-TW",
        "locales": SUPPORTED_LOCALES,
        "t": strings,
        "status_labels": CONSERVATION_LABELS[locale],
    }
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
