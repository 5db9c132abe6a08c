from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.auth.models import User
from app.core.deps import get_optional_user

TEMPLATE_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

router = APIRouter(tags=["web"])

# path -> template for pages that need a logged-in user
PAGES = {
    "/": "index.html",
    "/map": "map.html",
    "/ashen": "ashen.html",
    "/story": "story.html",
    "/library": "library.html",
}


def _render(request: Request, template: str, user: Optional[User] = None):
    return templates.TemplateResponse(request, template, {"user": user})


def _page(template: str):
    def page(request: Request, user: Optional[User] = Depends(get_optional_user)):
        if not user:
            return RedirectResponse(url="/login", status_code=303)
        return _render(request, template, user)
    return page


for _path, _template in PAGES.items():
    router.add_api_route(
        _path,
        _page(_template),
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
    )


@router.get("/admin", response_class=HTMLResponse, include_in_schema=False)
def admin_page(request: Request, user: Optional[User] = Depends(get_optional_user)):
    if not user:
        return RedirectResponse(url="/login", status_code=303)
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Forbidden")
    return _render(request, "admin.html", user)


# ======================================================
# AUTH PAGES (bounce to / when already logged in)
# ======================================================
@router.get("/login", response_class=HTMLResponse, include_in_schema=False)
def login_page(request: Request, user: Optional[User] = Depends(get_optional_user)):
    if user:
        return RedirectResponse(url="/", status_code=303)
    return _render(request, "login.html")


@router.get("/register", response_class=HTMLResponse, include_in_schema=False)
def register_page(request: Request, user: Optional[User] = Depends(get_optional_user)):
    if user:
        return RedirectResponse(url="/", status_code=303)
    return _render(request, "register.html")
