from typing import Optional

import typer


class DownloadProgress:
    """
    Renders ``Downloading... NN.N%`` on a single line. Without a declared
    content length it falls back to the byte count.
    """
    def __init__(self):
        self._last = None
        self._started = False

    def __call__(self, downloaded: int, total: Optional[int]):
        if total:
            text = f"Downloading... {min(downloaded / total, 1.0) * 100:.1f}%"
        else:
            text = f"Downloading... {downloaded / (1024 * 1024):.1f} MB"
        if text == self._last:
            return
        self._last = text
        self._started = True
        typer.echo(f"\r{text}", nl=False)

    def end_line(self):
        """Terminate the progress line, if one was started."""
        if self._started:
            typer.echo("")
            self._started = False

    def finish(self):
        if self._started:
            self.end_line()
            typer.echo("Download complete!")
