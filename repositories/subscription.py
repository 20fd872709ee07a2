class SubscriptionRepository:
    def get_player_ids(self, user_id: str) -> list[str]:
        raise NotImplementedError  # pragma: no cover
