# sinogram_phantom.py
import numpy as np
import matplotlib.pyplot as plt
from recotools import Interpolation, SinogramGenerator, rescale, shepp_logan_2d


def main():
    Nx, Ny = 256, 256
    phantom = shepp_logan_2d(Ny, Nx)
    num_views = 180
    num_scans = 256

    generator = SinogramGenerator(
        interpolation=Interpolation.LINEAR,
        rescaler=rescale,
        min_cutoff=0.0,
        target_scale=255.0,
    )
    sinogram = generator.generate(phantom, num_views, num_scans, 0.0, 180.0)
    sinogram_nn = SinogramGenerator(Interpolation.NEAREST).generate(phantom, num_views, num_scans, 0.0, 180.0)

    plt.figure(figsize=(12, 4))
    plt.subplot(1, 3, 1)
    plt.imshow(phantom, cmap='gray')
    plt.axis("off")
    plt.title("Phantom")
    plt.subplot(1, 3, 2)
    plt.imshow(sinogram, aspect='auto', cmap='gray')
    plt.axis("off")
    plt.title("Linear Sinogram")
    plt.subplot(1, 3, 3)
    plt.imshow(np.abs(sinogram - sinogram_nn), aspect='auto', cmap='gray')
    plt.axis("off")
    plt.title("|Linear - Nearest|")
    plt.show()

    # 8-bit range once rescaled with target_scale = 255
    print("Sinogram min/max:", sinogram.min(), sinogram.max())


if __name__ == "__main__":
    main()
