from zdrofit.schemas.pascal import PascalModel


class LoginRequest(PascalModel):
    remember_me: bool
    login: str
    password: str


class Member(PascalModel):
    id: int
    home_club_id: int
    default_club_id: int


class User(PascalModel):
    member: Member


class LoginResponse(PascalModel):
    user: User
