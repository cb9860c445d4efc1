#!/usr/bin/env python
# coding: utf-8

# # A Radial Manual Tour Of Clustered Data
# This notebook demonstrates usage of `manual_tours` on a small synthetic dataset with three clusters, each shifted along a different variable.
# 
# A manual tour starts from a 2D projection basis $B\in \mathbb{R}^{p\times 2}$ and rotates a single variable $k$ out of the projection plane and back again. The variable sits at an out-of-plane angle $\phi_{s} = \arccos\|B_{k\cdot}\|$; the tour visits $\phi_{\min}$ (the variable fully in the plane), then $\phi_{\max}$ (fully out of the plane), then returns to $\phi_{s}$. Watching whether the cluster structure survives tells us how much that variable matters to it.

# In[1]:


import numpy as np
import matplotlib.pyplot as plt
import manual_tours as mt


# Generate clustered data and standardize each variable:

# In[2]:


rng = np.random.default_rng(0)
data, labels = mt.synthetic.make_clusters(n_per_cluster=40, p=6, n_clusters=3, sep=4.0, rng=rng)
data = mt.scale_sd(data)


# Pick a starting basis. The half-circle basis gives every variable the same contribution, so no variable is favoured before the tour starts:

# In[3]:


basis = mt.basis_half_circle(data)
print(mt.is_orthonormal(basis))


# $\textbf{Main tour computation}$: rotate variable V1 radially in steps of 0.1 radians.

# In[4]:


tour = mt.radial_tour(basis, "V1", angle=0.1)
print(tour.to_text())


# Flatten the tour into long tables. `basis_frames` holds the axis coordinates of every variable in every frame, `data_frames` the projected (mean-centred) observations.

# In[5]:


tables = tour.flatten(data, data_label=labels.astype(str))
tables.basis_frames.head(8)


# Draw a handful of frames. The manipulated variable is highlighted; the axes are drawn in the bottom-left corner of the data.

# In[6]:


def show_frame(ax, tables, i):
    bf, df = tables.frame(i)
    axes = mt.scale_axes(bf, "bottomleft", to=df)
    x0, y0 = mt.scale_axes(np.zeros((1, 2)), "bottomleft", to=df)[0]

    for lab, grp in df.groupby("label"):
        ax.scatter(grp["x"], grp["y"], s=8, label=lab)
    for j, (x, y, name) in enumerate(axes[["x", "y", "label"]].itertuples(index=False), start=1):
        color = "red" if j == tables.manip_var else "grey"
        ax.plot([x0, x], [y0, y], color=color, lw=1)
        ax.text(x, y, name, fontsize=7, color=color)
    ax.set_title(f"frame {i}")
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])


picks = np.linspace(1, tables.n_frames, 6).round().astype(int)
fig, axs = plt.subplots(2, 3, figsize=(12, 8))
for ax, i in zip(axs.ravel(), picks):
    show_frame(ax, tables, int(i))
axs[0, 0].legend(title="cluster", fontsize=7)
plt.tight_layout()
plt.show()


# A single frame can also be computed directly, e.g. for an interactive slider over $\phi$:

# In[7]:


frame = mt.oblique_frame(basis, "V1", theta=0.0, phi=np.pi / 4, data=data)
frame.basis_frames
