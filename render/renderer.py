import logging
from typing import Dict, Sequence

import cv2

from tagger.config import (
    COLOR_PLAYER_A,
    COLOR_PLAYER_B,
    DEFAULT_FPS,
    OVERLAY_ALPHA,
    OVERLAY_HEIGHT,
    OVERLAY_MARGIN,
    OVERLAY_WIDTH,
)
from tagger.models import Player, Score, TaggedAction
from tagger.score_engine import point_label
from tagger.timeline import score_at

logger = logging.getLogger(__name__)


class ScoreboardRenderer:

    def __init__(
        self,
        input_path: str,
        output_path: str,
        history: Sequence[TaggedAction],
        names: Dict[Player, str],
    ):
        self.input_path = input_path
        self.output_path = output_path
        self.history = sorted(history, key=lambda a: a.video_time)
        self.names = names

        if not self.history:
            raise ValueError("History cannot be empty")

    def render(self) -> int:

        cap = cv2.VideoCapture(self.input_path)

        if not cap.isOpened():
            raise RuntimeError("Cannot open input video")

        fps = self.resolve_fps(cap.get(cv2.CAP_PROP_FPS))
        width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

        fourcc = cv2.VideoWriter_fourcc(*"mp4v")
        out = cv2.VideoWriter(self.output_path, fourcc, fps, (width, height))

        logger.info("Rendering %s -> %s (%dx%d @ %.2f fps)",
                    self.input_path, self.output_path, width, height, fps)

        frame_count = 0

        while True:
            ret, frame = cap.read()
            if not ret:
                break

            current_time = frame_count / fps

            score = score_at(self.history, current_time)

            self.draw_scoreboard(frame, score, width, height)

            out.write(frame)
            frame_count += 1

        cap.release()
        out.release()

        logger.info("Rendered %d frames", frame_count)
        return frame_count

    @staticmethod
    def resolve_fps(fps: float) -> float:
        if not fps or fps != fps or fps <= 0:
            logger.warning("Video reports no frame rate, assuming %.1f fps", DEFAULT_FPS)
            return DEFAULT_FPS
        return fps

    # ----------------------------------------------------
    # DRAWING
    # ----------------------------------------------------

    def draw_scoreboard(self, frame, score: Score, width: int, height: int):

        # bottom-right corner
        x1 = width - OVERLAY_WIDTH - OVERLAY_MARGIN
        y1 = height - OVERLAY_HEIGHT - OVERLAY_MARGIN
        x2 = width - OVERLAY_MARGIN
        y2 = height - OVERLAY_MARGIN

        # background box
        overlay = frame.copy()
        cv2.rectangle(overlay, (x1, y1), (x2, y2), (0, 0, 0), -1)
        cv2.addWeighted(overlay, OVERLAY_ALPHA, frame, 1 - OVERLAY_ALPHA, 0, frame)

        font = cv2.FONT_HERSHEY_SIMPLEX
        white = (255, 255, 255)
        grey = (160, 160, 160)

        # Column headers
        cv2.putText(frame, "SET", (x2 - 150, y1 + 22), font, 0.45, grey, 1)
        cv2.putText(frame, "GMS", (x2 - 105, y1 + 22), font, 0.45, grey, 1)
        cv2.putText(frame, "PTS", (x2 - 55, y1 + 22), font, 0.45, grey, 1)

        rows = [
            (Player.A, y1 + 55, COLOR_PLAYER_A),
            (Player.B, y1 + 90, COLOR_PLAYER_B),
        ]

        for player, y, color in rows:
            # Hershey fonts only cover ASCII
            name = self.names[player].encode("ascii", "replace").decode("ascii")
            cv2.putText(frame, name[:14].upper(), (x1 + 15, y), font, 0.6, white, 2)
            cv2.putText(frame, str(score.sets_of(player)), (x2 - 145, y), font, 0.7, color, 2)
            cv2.putText(frame, str(score.games_of(player)), (x2 - 100, y), font, 0.7, white, 2)
            cv2.putText(frame, point_label(score, player), (x2 - 55, y), font, 0.7, white, 2)
