"""Batch descriptor extraction over a directory of images."""
from __future__ import annotations
import os
import time
from typing import Any, Dict, List, Optional
from tqdm import tqdm

from mrelbp.main.descriptors.parameters import Parameters
from mrelbp.main.descriptors.pipeline import pipeline_lbp, pipeline_mrelbp
from mrelbp.main.standardization.local import LocalStandardization
from mrelbp.main.utils.config import ensure_keys, require_section
from mrelbp.main.utils.config_loader import load_descriptor_settings
from mrelbp.main.utils.io_utils import ensure_dir, flush_dir, list_images, load_grayscale, save_descriptor_result

__all__ = ["DescriptorBatch", "describe_image"]

MODES = ('lbp', 'mrelbp')


def describe_image(image, params: Parameters, mode: str = 'mrelbp', standardize: bool = False):
    """Run one image through the selected pipeline.

    Returns ``(images, histograms)`` keyed by channel name.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown descriptor mode '{mode}', expected one of {MODES}")
    if standardize:
        image = LocalStandardization.from_parameters(params).standardize(image, params.padding, n_jobs=params.n_jobs)
    if mode == 'lbp':
        mapped, hist = pipeline_lbp(image, params)
        return {'S': mapped}, {'S': hist}
    res = pipeline_mrelbp(image, params)
    images = {'L': res.L, 'S': res.S, 'R': res.R}
    hists = {'L': res.hist_l, 'S': res.hist_s, 'R': res.hist_r, 'center': res.hist_center}
    return images, hists


class DescriptorBatch:
    def __init__(self, cfg: Dict[str, Any], params: Optional[Parameters] = None):
        self.cfg = cfg
        self.params = params or Parameters.from_config(cfg)
        batch = require_section(cfg, 'batch')
        ensure_keys(batch, ['mode', 'input_dir', 'output_dir'], 'batch')
        self.mode = str(batch['mode']).lower()
        if self.mode not in MODES:
            raise ValueError(f"Unknown descriptor mode '{self.mode}', expected one of {MODES}")
        self.input_dir = batch['input_dir']
        self.output_dir = batch['output_dir']
        self.extensions = batch.get('extensions', ['png'])
        self.flush_output = batch.get('flush_output', False)
        stand = cfg.get('standardization') or {}
        self.standardize = bool(stand.get('enabled', False))

    def run(self) -> List[str]:
        cfg = self.cfg
        if not os.path.isdir(self.input_dir):
            raise FileNotFoundError(f"Input directory not found: {self.input_dir}")
        if self.flush_output:
            flush_dir(self.output_dir)
        ensure_dir(self.output_dir)

        paths = list_images(self.input_dir, self.extensions)
        processed: List[str] = []
        start_time = time.time()
        for path in tqdm(paths, disable=not cfg.get('progress_bar', True), desc=f"{self.mode.upper()} descriptors"):
            stem = os.path.splitext(os.path.basename(path))[0]
            image = load_grayscale(path)
            images, hists = describe_image(image, self.params, self.mode, self.standardize)
            save_descriptor_result(images, hists, self.output_dir, stem)
            processed.append(stem)

        elapsed = time.time() - start_time
        if cfg.get('verbose', True):
            print(f"[batch] {len(processed)} images described ({self.mode}) in {elapsed:.2f}s -> {self.output_dir}")
        return processed


def main():
    cfg = load_descriptor_settings()
    DescriptorBatch(cfg).run()


if __name__ == '__main__':
    main()
