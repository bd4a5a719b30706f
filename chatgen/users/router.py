# chatgen/users/router.py
from fastapi import APIRouter, Depends, Request

from chatgen.users.schemas import LoginIn, LoginOut, SignupIn, SignupOut, UserOut
from chatgen.users.store import UserStore
from chatgen.users import service as svc

router = APIRouter(tags=["users"])


def get_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_password_policy(request: Request) -> str:
    return request.app.state.settings.PASSWORD_POLICY


@router.post("/signup", response_model=SignupOut)
async def signup(
    payload: SignupIn,
    store: UserStore = Depends(get_store),
    policy: str = Depends(get_password_policy),
):
    await svc.signup(store, payload, password_policy=policy)
    return SignupOut()


@router.post("/login", response_model=LoginOut)
async def login(payload: LoginIn, store: UserStore = Depends(get_store)):
    user = await svc.login(store, payload)
    return LoginOut(user=UserOut.model_validate(user))
